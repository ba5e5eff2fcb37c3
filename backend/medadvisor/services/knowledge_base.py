"""
Knowledge Base: read-only symptom and medicine tables.

Built once at startup and never written to afterwards, so it can be shared
by every request thread without locking. All lookups are total: unknown keys
give an empty result, never an exception.

Usage:
    from medadvisor.services.knowledge_base import get_knowledge_base
    kb = get_knowledge_base()
    kb.medicines_for("headache")
    kb.interaction_between("M005", "M015")
"""
import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from medadvisor.schemas.advice import Severity
from medadvisor.schemas.medicine import Medicine, SymptomInfo
from medadvisor.services import knowledge_data
from medadvisor.services.symptom_normalizer import normalize

logger = logging.getLogger(__name__)

_EMPTY_INFO = SymptomInfo()
_EMPTY_MAPPING: Mapping = MappingProxyType({})


def _by_key(table: Mapping[str, object]) -> Dict[str, object]:
    """Re-key a table by normalized symptom key. Blank keys are dropped so
    blank input can never match an entry."""
    keyed = {}
    for raw, value in table.items():
        key = normalize(raw)
        if not key:
            logger.warning(f"[KnowledgeBase] Ignoring blank table key {raw!r}")
            continue
        keyed[key] = value
    return keyed


class KnowledgeBase:
    """Immutable lookup tables keyed by normalized symptom key or medicine id."""

    def __init__(
        self,
        medicines: Iterable[Medicine],
        symptom_medicines: Mapping[str, Sequence[str]],
        symptom_info: Optional[Mapping[str, SymptomInfo]] = None,
        critical_symptoms: Iterable[str] = (),
        specialists: Optional[Mapping[str, Mapping[str, float]]] = None,
        interactions: Optional[Mapping[str, Mapping[str, str]]] = None,
        side_effects: Optional[Mapping[str, Sequence[str]]] = None,
        health_advice: Optional[Mapping[str, Sequence[str]]] = None,
        interaction_severity: Optional[Mapping[Tuple[str, str], Severity]] = None,
    ):
        catalog: Dict[str, Medicine] = {}
        for med in medicines:
            if med.id in catalog:
                raise ValueError(f"Duplicate medicine id in knowledge base: {med.id}")
            catalog[med.id] = med
        self._medicines = MappingProxyType(catalog)

        by_symptom = {}
        for symptom, ids in symptom_medicines.items():
            unknown = [i for i in ids if i not in catalog]
            if unknown:
                raise ValueError(f"Symptom '{symptom}' references unknown medicines: {unknown}")
            by_symptom[symptom] = tuple(catalog[i] for i in ids)
        self._symptom_medicines = MappingProxyType(_by_key(by_symptom))

        self._symptom_info = MappingProxyType(_by_key(symptom_info or {}))
        self._critical = frozenset(normalize(s) for s in critical_symptoms if normalize(s))
        self._specialists = MappingProxyType(
            {k: MappingProxyType(dict(v)) for k, v in _by_key(specialists or {}).items()}
        )
        self._interactions = MappingProxyType(
            {k: MappingProxyType(dict(v)) for k, v in (interactions or {}).items()}
        )
        self._side_effects = MappingProxyType(
            {k: tuple(v) for k, v in (side_effects or {}).items()}
        )
        self._advice = MappingProxyType(
            {k: tuple(v) for k, v in _by_key(health_advice or {}).items()}
        )
        self._severity = MappingProxyType(
            {frozenset(pair): Severity(level) for pair, level in (interaction_severity or {}).items()}
        )

    # --- symptom lookups -------------------------------------------------

    def medicines_for(self, symptom_key: str) -> Tuple[Medicine, ...]:
        return self._symptom_medicines.get(symptom_key, ())

    def info_for(self, symptom_key: str) -> SymptomInfo:
        return self._symptom_info.get(symptom_key, _EMPTY_INFO)

    def is_critical(self, symptom_key: str) -> bool:
        return symptom_key in self._critical

    def specialists_for(self, symptom_key: str) -> Mapping[str, float]:
        return self._specialists.get(symptom_key, _EMPTY_MAPPING)

    def known_symptoms(self) -> List[str]:
        """Every symptom key that has candidates or is critical, sorted."""
        return sorted(set(self._symptom_medicines) | self._critical)

    # --- medicine lookups ------------------------------------------------

    def get_medicine(self, medicine_id: str) -> Optional[Medicine]:
        return self._medicines.get(medicine_id)

    def all_medicines(self) -> List[Medicine]:
        return list(self._medicines.values())

    def side_effects_for(self, medicine_id: str) -> Tuple[str, ...]:
        return self._side_effects.get(medicine_id, ())

    def interaction_between(self, id_a: str, id_b: str) -> Optional[str]:
        """Check the table under id_a for id_b, then under id_b for id_a."""
        description = self._interactions.get(id_a, _EMPTY_MAPPING).get(id_b)
        if description is None:
            description = self._interactions.get(id_b, _EMPTY_MAPPING).get(id_a)
        return description

    def interaction_severity(self, id_a: str, id_b: str) -> Optional[Severity]:
        """Graded severity for the pair, if the tables carry one."""
        return self._severity.get(frozenset((id_a, id_b)))

    # --- condition lookups -----------------------------------------------

    def advice_for(self, condition: str) -> Tuple[str, ...]:
        return self._advice.get(condition, ())


def build_default_knowledge_base() -> KnowledgeBase:
    """Assemble the KnowledgeBase from the static tables in knowledge_data."""
    medicines = [
        Medicine(
            id=med_id,
            name=name,
            price=price,
            category=category,
            requires_prescription=rx,
            description=description,
            side_effects=tuple(knowledge_data.SIDE_EFFECTS.get(med_id, ())),
        )
        for med_id, name, price, category, rx, description in knowledge_data.MEDICINES
    ]
    kb = KnowledgeBase(
        medicines=medicines,
        symptom_medicines=knowledge_data.SYMPTOM_MEDICINES,
        symptom_info={
            key: SymptomInfo(description=desc, precautions=tuple(precautions))
            for key, (desc, precautions) in knowledge_data.SYMPTOM_INFO.items()
        },
        critical_symptoms=knowledge_data.CRITICAL_SYMPTOMS,
        specialists=knowledge_data.SPECIALISTS,
        interactions=knowledge_data.INTERACTIONS,
        side_effects=knowledge_data.SIDE_EFFECTS,
        health_advice=knowledge_data.HEALTH_ADVICE,
        interaction_severity=knowledge_data.INTERACTION_SEVERITY,
    )
    logger.info(
        f"[KnowledgeBase] Loaded {len(medicines)} medicines, "
        f"{len(knowledge_data.SYMPTOM_MEDICINES)} symptoms, "
        f"{len(knowledge_data.CRITICAL_SYMPTOMS)} critical symptoms"
    )
    return kb


_kb: Optional[KnowledgeBase] = None
_kb_lock = threading.Lock()


def get_knowledge_base() -> KnowledgeBase:
    """Process-wide default KnowledgeBase, built on first call.

    The lock is the one-time initialization barrier; reads after that need
    no synchronization.
    """
    global _kb
    if _kb is None:
        with _kb_lock:
            if _kb is None:
                _kb = build_default_knowledge_base()
    return _kb
