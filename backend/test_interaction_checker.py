"""Interaction checker: pairwise scan, both table directions, severity tagging."""
from medadvisor.schemas.advice import Severity
from medadvisor.schemas.medicine import Medicine
from medadvisor.services.interaction_checker import DEFAULT_SEVERITY, check_medicine_interactions
from medadvisor.services.knowledge_base import KnowledgeBase, get_knowledge_base


def make_kb():
    """Interaction A-B recorded only under A; B-C only under C; no grades."""
    return KnowledgeBase(
        medicines=[Medicine(id=i, name=i, price=1.0) for i in ("A", "B", "C", "D")],
        symptom_medicines={},
        interactions={
            "A": {"B": "A and B together cause trouble"},
            "C": {"B": "C boosts B"},
        },
    )


def test_one_sided_entry_found_once():
    kb = make_kb()
    report = check_medicine_interactions(kb, ["A", "B"])
    assert report.has_interactions is True
    assert len(report.interactions) == 1
    record = report.interactions[0]
    assert (record.first_id, record.second_id) == ("A", "B")
    assert record.description == "A and B together cause trouble"


def test_reverse_input_order_still_found():
    kb = make_kb()
    report = check_medicine_interactions(kb, ["B", "A"])
    assert len(report.interactions) == 1
    assert (report.interactions[0].first_id, report.interactions[0].second_id) == ("B", "A")


def test_single_or_empty_input_has_no_interactions():
    kb = make_kb()
    for ids in (["A"], [], None):
        report = check_medicine_interactions(kb, ids)
        assert report.has_interactions is False
        assert report.interactions == []


def test_repeated_id_not_checked_against_itself():
    kb = make_kb()
    report = check_medicine_interactions(kb, ["A", "A", "B", "B"])
    assert len(report.interactions) == 1


def test_all_pairs_scanned_in_input_order():
    kb = make_kb()
    report = check_medicine_interactions(kb, ["A", "B", "C", "D"])
    pairs = [(r.first_id, r.second_id) for r in report.interactions]
    assert pairs == [("A", "B"), ("B", "C")]


def test_ungraded_pair_gets_default_severity():
    kb = make_kb()
    report = check_medicine_interactions(kb, ["A", "B"])
    assert report.interactions[0].severity == DEFAULT_SEVERITY == Severity.CAUTION


def test_graded_severity_from_tables():
    kb = get_knowledge_base()
    report = check_medicine_interactions(kb, ["M005", "M015", "M004", "M010"])
    by_pair = {(r.first_id, r.second_id): r.severity for r in report.interactions}
    assert by_pair[("M005", "M015")] == Severity.MAJOR
    # dextromethorphan duplication has no graded entry
    assert by_pair[("M004", "M010")] == Severity.CAUTION


def test_no_interaction_between_unrelated_medicines():
    kb = get_knowledge_base()
    report = check_medicine_interactions(kb, ["M006", "M008", "M012"])
    assert report.has_interactions is False
