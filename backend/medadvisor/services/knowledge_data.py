"""
Static knowledge tables.

Illustrative data only, NOT a medical database. Every key here is already a
normalized symptom key (lower-case, trimmed); KnowledgeBase normalizes again
on load so a careless edit can't introduce an unreachable entry.

Interactions are deliberately recorded under one medicine of the pair only
(the lookup checks both directions).
"""

# medicine id -> side effects
SIDE_EFFECTS = {
    "M001": ["Nausea", "Liver damage if overdosed", "Rare skin reactions"],
    "M002": ["Stomach upset", "Heartburn", "Dizziness", "Raised blood pressure with long-term use"],
    "M003": ["Drowsiness", "Dry mouth", "Blurred vision", "Constipation"],
    "M004": ["Drowsiness", "Dizziness", "Dry mouth", "Nausea"],
    "M005": ["Stomach irritation", "Bleeding risk", "Ringing in the ears at high doses"],
    "M006": ["Headache", "Fatigue", "Dry mouth"],
    "M007": ["Black tongue or stool (harmless)", "Constipation"],
    "M008": ["Constipation", "Gas"],
    "M009": ["Constipation", "Abdominal cramps", "Dizziness"],
    "M010": ["Dizziness", "Drowsiness", "Nausea"],
    "M011": ["Restlessness", "Insomnia", "Raised heart rate"],
    "M012": ["Numbness of the mouth", "Mild throat irritation"],
    "M013": ["Diarrhea", "Nausea", "Skin rash", "Allergic reaction in penicillin-sensitive patients"],
    "M014": ["Low blood sugar", "Injection site reactions", "Weight gain"],
    "M015": ["Bleeding", "Bruising", "Hair loss"],
    "M016": ["Skin thinning with prolonged use", "Burning or stinging"],
    "M017": ["Daytime drowsiness", "Headache", "Vivid dreams"],
    "M018": ["Drowsiness", "Dry mouth", "Blurred vision"],
}

# (id, name, price, category, requires_prescription, description)
MEDICINES = [
    ("M001", "Tylenol", 6.99, "Pain Relief", False, "Acetaminophen. Helps with pain and fever"),
    ("M002", "Advil", 7.50, "Pain Relief", False, "Ibuprofen. Reduces inflammation and pain"),
    ("M003", "Benadryl", 9.25, "Allergy", False, "Diphenhydramine. Helps with allergies and runny nose"),
    ("M004", "NyQuil", 10.50, "Cold & Flu", False, "Night-time cold relief. Contains acetaminophen"),
    ("M005", "Aspirin", 4.99, "Pain Relief", False, "Common pain reliever and fever reducer"),
    ("M006", "Claritin", 8.50, "Allergy", False, "Loratadine. Non-drowsy allergy relief"),
    ("M007", "Pepto-Bismol", 6.25, "Digestive Health", False, "Bismuth subsalicylate. Upset stomach and diarrhea"),
    ("M008", "Tums", 5.49, "Digestive Health", False, "Calcium carbonate antacid"),
    ("M009", "Imodium", 7.99, "Digestive Health", False, "Loperamide. Controls diarrhea"),
    ("M010", "Robitussin DM", 8.75, "Cold & Flu", False, "Dextromethorphan cough suppressant"),
    ("M011", "Sudafed", 9.10, "Cold & Flu", False, "Pseudoephedrine nasal decongestant"),
    ("M012", "Cepacol", 4.75, "Throat Care", False, "Benzocaine throat lozenges"),
    ("M013", "Amoxicillin", 12.75, "Antibiotic", True, "Antibiotic for bacterial infections"),
    ("M014", "Insulin", 45.99, "Diabetes", True, "For managing diabetes"),
    ("M015", "Warfarin", 15.20, "Anticoagulant", True, "Blood thinner"),
    ("M016", "Hydrocortisone Cream", 6.50, "Skin Care", False, "1% topical steroid for itching and rash"),
    ("M017", "Melatonin", 7.25, "Sleep Aid", False, "Short-term help falling asleep"),
    ("M018", "Dramamine", 6.80, "Digestive Health", False, "Dimenhydrinate. Nausea and motion sickness"),
]

# symptom -> candidate medicine ids, in preference order
SYMPTOM_MEDICINES = {
    "headache": ["M001", "M002", "M005"],
    "fever": ["M001", "M002", "M005"],
    "cough": ["M010", "M004"],
    "sore throat": ["M012", "M001", "M004"],
    "runny nose": ["M006", "M003", "M011"],
    "body ache": ["M001", "M002"],
    "nausea": ["M018", "M007"],
    "congestion": ["M011", "M004"],
    "sneezing": ["M006", "M003"],
    "heartburn": ["M008", "M007"],
    "indigestion": ["M008", "M007"],
    "diarrhea": ["M009", "M007"],
    "itching": ["M016", "M003"],
    "rash": ["M016"],
    "insomnia": ["M017", "M003"],
    "muscle pain": ["M002", "M001"],
    "toothache": ["M002", "M001"],
    "motion sickness": ["M018"],
}

CRITICAL_SYMPTOMS = [
    "chest pain",
    "difficulty breathing",
    "severe headache",
    "severe stomach pain",
    "passed out",
    "very high fever",
    "coughing blood",
    "confusion",
    "seizure",
    "slurred speech",
]

_SEEK_CARE = "Seek emergency medical care immediately"

# symptom -> (description, precautions)
SYMPTOM_INFO = {
    "headache": (
        "Pain or pressure in the head, usually tension-related",
        ["Get plenty of rest", "Drink lots of water", "Limit screen time", "Avoid skipping meals"],
    ),
    "fever": (
        "Body temperature above 38°C, often a sign of infection",
        ["Get plenty of rest", "Drink lots of water", "Wear light clothing", "Call doctor if you feel worse"],
    ),
    "cough": (
        "Reflex to clear the airways",
        ["Drink warm fluids", "Use a humidifier", "Avoid smoke and dust", "Cover your mouth when coughing"],
    ),
    "sore throat": (
        "Pain or irritation of the throat",
        ["Gargle with warm salt water", "Drink warm fluids", "Rest your voice"],
    ),
    "runny nose": (
        "Excess nasal discharge from a cold or allergy",
        ["Wash hands often", "Use tissues and dispose of them", "Drink lots of water"],
    ),
    "body ache": (
        "General muscle soreness, common with viral illness",
        ["Get plenty of rest", "Apply a warm compress", "Drink lots of water"],
    ),
    "nausea": (
        "Feeling of needing to vomit",
        ["Sip clear fluids slowly", "Eat bland food", "Avoid strong smells"],
    ),
    "congestion": (
        "Blocked or stuffy nose",
        ["Inhale steam", "Use a saline nasal rinse", "Sleep with your head raised"],
    ),
    "sneezing": (
        "Irritation of the nasal lining",
        ["Avoid known allergens", "Wash hands often"],
    ),
    "heartburn": (
        "Burning sensation behind the breastbone after eating",
        ["Avoid spicy and fatty food", "Do not lie down right after meals", "Eat smaller meals"],
    ),
    "indigestion": (
        "Discomfort in the upper abdomen after eating",
        ["Eat smaller meals", "Avoid spicy and fatty food", "Limit caffeine and alcohol"],
    ),
    "diarrhea": (
        "Loose, watery stools",
        ["Drink oral rehydration solution", "Wash hands often", "Eat bland food"],
    ),
    "itching": (
        "Irritated skin that makes you want to scratch",
        ["Avoid scratching", "Use fragrance-free moisturizer", "Wear loose cotton clothing"],
    ),
    "rash": (
        "Change in skin colour or texture",
        ["Avoid scratching", "Keep the area clean and dry", "Call doctor if it spreads quickly"],
    ),
    "insomnia": (
        "Trouble falling or staying asleep",
        ["Keep a regular sleep schedule", "Avoid caffeine after noon", "Limit screen time"],
    ),
    "muscle pain": (
        "Localized soreness in a muscle group",
        ["Rest the affected muscle", "Apply a warm compress", "Stretch gently"],
    ),
    "toothache": (
        "Pain in or around a tooth",
        ["Rinse with warm salt water", "Avoid very hot or cold food", "See a dentist if it lasts"],
    ),
    "motion sickness": (
        "Nausea triggered by travel",
        ["Look at the horizon", "Sit facing forward", "Avoid heavy meals before travel"],
    ),
    "chest pain": ("Possible cardiac emergency", [_SEEK_CARE, "Do not drive yourself"]),
    "difficulty breathing": ("Possible respiratory emergency", [_SEEK_CARE, "Sit upright"]),
    "severe headache": ("Sudden or worst-ever headache", [_SEEK_CARE]),
    "severe stomach pain": ("Intense abdominal pain", [_SEEK_CARE, "Do not eat or drink"]),
    "passed out": ("Loss of consciousness", [_SEEK_CARE]),
    "very high fever": ("Temperature above 40°C", [_SEEK_CARE, "Cool the body with damp cloths"]),
    "coughing blood": ("Blood in sputum", [_SEEK_CARE]),
    "confusion": ("Sudden disorientation", [_SEEK_CARE, "Do not leave the person alone"]),
    "seizure": ("Uncontrolled shaking or blackout", [_SEEK_CARE, "Do not leave the person alone"]),
    "slurred speech": ("Possible stroke sign", [_SEEK_CARE]),
}

# symptom -> specialist -> relevance (0.0 - 1.0)
SPECIALISTS = {
    "headache": {"General Practitioner": 0.6, "Neurologist": 0.4},
    "fever": {"General Practitioner": 0.7, "Infectious Disease Specialist": 0.3},
    "cough": {"General Practitioner": 0.6, "Pulmonologist": 0.5},
    "sore throat": {"General Practitioner": 0.6, "ENT Specialist": 0.5},
    "runny nose": {"General Practitioner": 0.5, "Allergist": 0.4, "ENT Specialist": 0.3},
    "body ache": {"General Practitioner": 0.6},
    "nausea": {"General Practitioner": 0.5, "Gastroenterologist": 0.5},
    "congestion": {"ENT Specialist": 0.5, "Allergist": 0.3},
    "sneezing": {"Allergist": 0.6},
    "heartburn": {"Gastroenterologist": 0.6},
    "indigestion": {"Gastroenterologist": 0.6, "General Practitioner": 0.3},
    "diarrhea": {"Gastroenterologist": 0.6, "General Practitioner": 0.4},
    "itching": {"Dermatologist": 0.7, "Allergist": 0.3},
    "rash": {"Dermatologist": 0.8},
    "insomnia": {"General Practitioner": 0.4, "Psychiatrist": 0.3},
    "muscle pain": {"General Practitioner": 0.5, "Orthopedist": 0.4},
    "toothache": {"Dentist": 0.9},
    "chest pain": {"Emergency Medicine": 1.0, "Cardiologist": 0.9},
    "difficulty breathing": {"Emergency Medicine": 1.0, "Pulmonologist": 0.8},
    "severe headache": {"Emergency Medicine": 0.9, "Neurologist": 0.8},
    "severe stomach pain": {"Emergency Medicine": 0.9, "Gastroenterologist": 0.7},
    "seizure": {"Emergency Medicine": 1.0, "Neurologist": 0.9},
    "slurred speech": {"Emergency Medicine": 1.0, "Neurologist": 0.9},
}

# medicine id -> other medicine id -> description (one direction only)
INTERACTIONS = {
    "M015": {
        "M005": "Aspirin with warfarin greatly increases bleeding risk",
        "M002": "Ibuprofen with warfarin increases bleeding risk",
        "M007": "Bismuth subsalicylate may increase warfarin's blood-thinning effect",
    },
    "M002": {
        "M005": "Ibuprofen can block aspirin's heart-protective effect and adds stomach bleeding risk",
    },
    "M001": {
        "M004": "NyQuil already contains acetaminophen; taking both risks liver damage",
    },
    "M004": {
        "M003": "Both cause drowsiness; combined sedation can be excessive",
        "M010": "Both contain dextromethorphan; risk of doubling the dose",
    },
    "M017": {
        "M003": "Melatonin with a sedating antihistamine adds to drowsiness",
    },
    "M013": {
        "M015": "Amoxicillin may raise the effect of warfarin; INR should be monitored",
    },
    "M007": {
        "M005": "Both contain salicylates; risk of salicylate toxicity",
    },
}

# Graded severity for pairs where it is known. Order within a pair is irrelevant.
INTERACTION_SEVERITY = {
    ("M015", "M005"): "major",
    ("M015", "M002"): "major",
    ("M001", "M004"): "major",
    ("M002", "M005"): "moderate",
    ("M004", "M003"): "moderate",
    ("M017", "M003"): "minor",
    ("M013", "M015"): "moderate",
    ("M007", "M005"): "moderate",
}

# condition -> advice
HEALTH_ADVICE = {
    "cold": [
        "Get plenty of rest",
        "Drink warm fluids",
        "Wash hands often to avoid spreading it",
        "See a doctor if symptoms last more than 10 days",
    ],
    "flu": [
        "Stay home and rest",
        "Drink lots of water",
        "Consider an annual flu vaccine",
        "See a doctor if you have trouble breathing",
    ],
    "fever": [
        "Rest and drink fluids",
        "Check your temperature regularly",
        "Seek care if it goes above 40°C or lasts more than 3 days",
    ],
    "headache": [
        "Keep regular sleep hours",
        "Stay hydrated",
        "Note triggers such as certain foods or stress",
    ],
    "allergy": [
        "Identify and avoid triggers",
        "Keep windows closed during high pollen days",
        "Shower after spending time outdoors",
    ],
    "indigestion": [
        "Eat smaller, slower meals",
        "Avoid lying down within 2 hours of eating",
        "Cut down on caffeine, alcohol and fatty food",
    ],
    "insomnia": [
        "Keep a consistent sleep schedule",
        "Avoid screens an hour before bed",
        "Keep the bedroom cool and dark",
    ],
    "diabetes": [
        "Monitor blood sugar as advised by your doctor",
        "Follow a balanced, low-sugar diet",
        "Exercise regularly",
        "Take medication exactly as prescribed",
    ],
    "hypertension": [
        "Reduce salt intake",
        "Exercise regularly",
        "Limit alcohol",
        "Check blood pressure regularly",
    ],
}
