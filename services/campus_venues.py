"""
Curated campus venue table for Obafemi Awolowo University, Ile-Ife. Loaded once into the static
location catalog.
"""

CAMPUS_VENUES = [
    # Main buildings and facilities
    {"id": "great-ife", "name": "Great Ife", "category": "Facilities",
     "lat": 7.5165, "lon": 4.5275, "description": "Main Auditorium",
     "keywords": ["auditorium", "hall", "events", "graduation"]},
    {"id": "library", "name": "Kenneth Dike Library", "category": "Academic",
     "lat": 7.5185, "lon": 4.5275, "description": "University Library",
     "keywords": ["library", "books", "study", "research"]},
    {"id": "admin", "name": "Administrative Building", "category": "Administration",
     "lat": 7.5190, "lon": 4.5280, "description": "University Administration",
     "keywords": ["admin", "office", "registrar", "vc office"]},
    {"id": "sub", "name": "Student Union Building", "category": "Student Services",
     "lat": 7.5175, "lon": 4.5265, "description": "SUB",
     "keywords": ["sub", "student union", "activities"]},

    # Faculties
    {"id": "science", "name": "Faculty of Science", "category": "Academic",
     "lat": 7.5195, "lon": 4.5295, "description": "Science Complex",
     "keywords": ["science", "physics", "chemistry", "biology", "mathematics"]},
    {"id": "arts", "name": "Faculty of Arts", "category": "Academic",
     "lat": 7.5205, "lon": 4.5305, "description": "Arts Complex",
     "keywords": ["arts", "literature", "languages", "philosophy", "history"]},
    {"id": "engineering", "name": "Faculty of Engineering", "category": "Academic",
     "lat": 7.5210, "lon": 4.5290, "description": "Engineering Complex",
     "keywords": ["engineering", "technology", "mechanical", "electrical", "civil"]},
    {"id": "law", "name": "Faculty of Law", "category": "Academic",
     "lat": 7.5170, "lon": 4.5260, "description": "Law Faculty",
     "keywords": ["law", "legal", "jurisprudence"]},
    {"id": "education", "name": "Faculty of Education", "category": "Academic",
     "lat": 7.5200, "lon": 4.5270, "description": "Education Faculty",
     "keywords": ["education", "teaching", "pedagogy"]},
    {"id": "social-sciences", "name": "Faculty of Social Sciences", "category": "Academic",
     "lat": 7.5180, "lon": 4.5290, "description": "Social Sciences",
     "keywords": ["social sciences", "psychology", "sociology", "economics"]},
    {"id": "agriculture", "name": "Faculty of Agriculture", "category": "Academic",
     "lat": 7.5220, "lon": 4.5320, "description": "Agriculture Faculty",
     "keywords": ["agriculture", "farming", "crop science"]},
    {"id": "medicine", "name": "Faculty of Medicine", "category": "Academic",
     "lat": 7.5160, "lon": 4.5270, "description": "Medical School",
     "keywords": ["medicine", "medical", "doctor", "health"]},
    {"id": "pharmacy", "name": "Faculty of Pharmacy", "category": "Academic",
     "lat": 7.5165, "lon": 4.5285, "description": "Pharmacy School",
     "keywords": ["pharmacy", "drugs", "pharmaceutical"]},
    {"id": "dentistry", "name": "Faculty of Dentistry", "category": "Academic",
     "lat": 7.5170, "lon": 4.5290, "description": "Dental School",
     "keywords": ["dentistry", "dental", "teeth"]},

    # Departments
    {"id": "computer-science", "name": "Computer Science Department", "category": "Academic",
     "lat": 7.5197, "lon": 4.5297, "description": "Department of Computer Science and Engineering",
     "keywords": ["computer science", "cse", "programming", "software engineering", "it"]},
    {"id": "physics-department", "name": "Physics Department", "category": "Academic",
     "lat": 7.5193, "lon": 4.5293, "description": "Department of Physics",
     "keywords": ["physics", "laboratory", "research"]},
    {"id": "chemistry-department", "name": "Chemistry Department", "category": "Academic",
     "lat": 7.5199, "lon": 4.5299, "description": "Department of Chemistry",
     "keywords": ["chemistry", "lab", "chemical engineering"]},
    {"id": "mathematics-department", "name": "Mathematics Department", "category": "Academic",
     "lat": 7.5191, "lon": 4.5291, "description": "Department of Mathematics",
     "keywords": ["mathematics", "statistics", "math"]},
    {"id": "biology-department", "name": "Biology Department", "category": "Academic",
     "lat": 7.5201, "lon": 4.5301, "description": "Department of Biological Sciences",
     "keywords": ["biology", "botany", "zoology", "microbiology"]},
    {"id": "english-department", "name": "English Department", "category": "Academic",
     "lat": 7.5207, "lon": 4.5307, "description": "Department of English Language",
     "keywords": ["english", "literature", "language"]},
    {"id": "history-department", "name": "History Department", "category": "Academic",
     "lat": 7.5203, "lon": 4.5303, "description": "Department of History",
     "keywords": ["history", "archaeology"]},
    {"id": "psychology-department", "name": "Psychology Department", "category": "Academic",
     "lat": 7.5182, "lon": 4.5292, "description": "Department of Psychology",
     "keywords": ["psychology", "counseling", "therapy"]},
    {"id": "economics-department", "name": "Economics Department", "category": "Academic",
     "lat": 7.5178, "lon": 4.5288, "description": "Department of Economics",
     "keywords": ["economics", "finance", "business"]},
    {"id": "mechanical-engineering", "name": "Mechanical Engineering Department", "category": "Academic",
     "lat": 7.5212, "lon": 4.5292, "description": "Department of Mechanical Engineering",
     "keywords": ["mechanical engineering", "workshop", "machines"]},
    {"id": "electrical-engineering", "name": "Electrical Engineering Department", "category": "Academic",
     "lat": 7.5208, "lon": 4.5288, "description": "Department of Electrical and Electronics Engineering",
     "keywords": ["electrical engineering", "electronics", "power systems"]},
    {"id": "civil-engineering", "name": "Civil Engineering Department", "category": "Academic",
     "lat": 7.5214, "lon": 4.5294, "description": "Department of Civil Engineering",
     "keywords": ["civil engineering", "construction", "structures"]},
    {"id": "computer-centre", "name": "Computer Centre", "category": "Academic",
     "lat": 7.5189, "lon": 4.5279, "description": "IT Services and Training",
     "keywords": ["computer centre", "it", "training", "internet"]},
    {"id": "language-centre", "name": "Language Centre", "category": "Academic",
     "lat": 7.5209, "lon": 4.5309, "description": "Foreign Language Learning",
     "keywords": ["language centre", "foreign languages", "training"]},

    # Health and sports
    {"id": "health", "name": "University Health Centre", "category": "Health Services",
     "lat": 7.5155, "lon": 4.5285, "description": "Medical Services",
     "keywords": ["health centre", "clinic", "medical", "doctor", "hospital"]},
    {"id": "sports", "name": "Sports Complex", "category": "Sports",
     "lat": 7.5140, "lon": 4.5300, "description": "Sports Facilities",
     "keywords": ["sports", "gym", "football", "basketball", "athletics"]},

    # Services and shopping
    {"id": "bookshop", "name": "University Bookshop", "category": "Shopping",
     "lat": 7.5175, "lon": 4.5270, "description": "Academic Bookstore",
     "keywords": ["bookshop", "books", "stationery", "supplies"]},
    {"id": "bank", "name": "Campus Bank", "category": "Financial Services",
     "lat": 7.5180, "lon": 4.5275, "description": "Banking Services",
     "keywords": ["bank", "atm", "money", "banking"]},
    {"id": "post-office", "name": "Post Office", "category": "Services",
     "lat": 7.5185, "lon": 4.5280, "description": "Postal Services",
     "keywords": ["post office", "mail", "courier"]},

    # Food
    {"id": "cafeteria", "name": "Main Cafeteria", "category": "Food Services",
     "lat": 7.5175, "lon": 4.5285, "description": "Dining Hall",
     "keywords": ["cafeteria", "food", "dining", "restaurant", "meals"]},
    {"id": "food-court", "name": "Student Food Court", "category": "Food Services",
     "lat": 7.5171, "lon": 4.5281, "description": "Student Dining Area",
     "keywords": ["food court", "dining", "restaurant", "meals"]},
    {"id": "snack-bar", "name": "Snack Bar", "category": "Food Services",
     "lat": 7.5173, "lon": 4.5267, "description": "Quick Meals and Snacks",
     "keywords": ["snack bar", "snacks", "drinks", "fast food"]},

    # Halls of residence
    {"id": "angola-hall", "name": "Angola Hall", "category": "Accommodation",
     "lat": 7.5120, "lon": 4.5250, "description": "Student Hostel",
     "keywords": ["angola hall", "hostel", "accommodation", "residence"]},
    {"id": "mozambique-hall", "name": "Mozambique Hall", "category": "Accommodation",
     "lat": 7.5110, "lon": 4.5260, "description": "Student Hostel",
     "keywords": ["mozambique hall", "hostel", "accommodation"]},
    {"id": "queens-hall", "name": "Queen Elizabeth II Hall", "category": "Accommodation",
     "lat": 7.5130, "lon": 4.5240, "description": "Female Hostel",
     "keywords": ["queens hall", "female hostel", "ladies"]},
    {"id": "namibia-hall", "name": "Namibia Hall", "category": "Accommodation",
     "lat": 7.5100, "lon": 4.5270, "description": "Student Hostel",
     "keywords": ["namibia hall", "hostel", "accommodation"]},
    {"id": "awolowo-hall", "name": "Awolowo Hall", "category": "Accommodation",
     "lat": 7.5125, "lon": 4.5255, "description": "Student Hostel",
     "keywords": ["awolowo hall", "hostel", "accommodation"]},
    {"id": "fajuyi-hall", "name": "Fajuyi Hall", "category": "Accommodation",
     "lat": 7.5105, "lon": 4.5245, "description": "Student Hostel",
     "keywords": ["fajuyi hall", "hostel", "accommodation"]},
    {"id": "guest-house", "name": "University Guest House", "category": "Accommodation",
     "lat": 7.5173, "lon": 4.5263, "description": "Visitor Accommodation",
     "keywords": ["guest house", "hotel", "visitors", "lodging"]},

    # Administration
    {"id": "senate-building", "name": "Senate Building", "category": "Administration",
     "lat": 7.5185, "lon": 4.5285, "description": "University Senate",
     "keywords": ["senate", "governance", "council"]},
    {"id": "registrar-office", "name": "Registrar's Office", "category": "Administration",
     "lat": 7.5192, "lon": 4.5282, "description": "Student Records and Registration",
     "keywords": ["registrar", "registration", "transcript", "certificate"]},
    {"id": "bursary", "name": "Bursary Department", "category": "Administration",
     "lat": 7.5188, "lon": 4.5278, "description": "Financial Services",
     "keywords": ["bursary", "fees", "payment", "financial aid"]},
    {"id": "vc-office", "name": "Vice-Chancellor's Office", "category": "Administration",
     "lat": 7.5194, "lon": 4.5284, "description": "Vice-Chancellor's Office",
     "keywords": ["vc office", "vice chancellor", "management"]},

    # Religious
    {"id": "chapel", "name": "University Chapel", "category": "Religious",
     "lat": 7.5190, "lon": 4.5270, "description": "Religious Center",
     "keywords": ["chapel", "church", "worship", "prayer"]},
    {"id": "mosque", "name": "University Mosque", "category": "Religious",
     "lat": 7.5195, "lon": 4.5275, "description": "Islamic Center",
     "keywords": ["mosque", "islamic center", "prayer"]},

    # Facilities and landmarks
    {"id": "conference-centre", "name": "Conference Centre", "category": "Facilities",
     "lat": 7.5163, "lon": 4.5273, "description": "Events and Conferences",
     "keywords": ["conference centre", "events", "meetings", "seminars"]},
    {"id": "alumni-house", "name": "Alumni House", "category": "Facilities",
     "lat": 7.5167, "lon": 4.5267, "description": "Alumni Affairs",
     "keywords": ["alumni house", "graduates", "alumni"]},
    {"id": "staff-club", "name": "Staff Club", "category": "Facilities",
     "lat": 7.5177, "lon": 4.5277, "description": "Staff Recreation Center",
     "keywords": ["staff club", "recreation", "bar", "restaurant"]},
    {"id": "car-park", "name": "Main Car Park", "category": "Facilities",
     "lat": 7.5183, "lon": 4.5273, "description": "Parking Area",
     "keywords": ["car park", "parking", "vehicles"]},
    {"id": "bus-stop", "name": "Campus Bus Stop", "category": "Facilities",
     "lat": 7.5195, "lon": 4.5255, "description": "Public Transportation",
     "keywords": ["bus stop", "transport", "bus", "shuttle"]},
    {"id": "main-gate", "name": "Main Gate", "category": "Landmarks",
     "lat": 7.5200, "lon": 4.5250, "description": "University Entrance",
     "keywords": ["main gate", "entrance", "security"]},
    {"id": "second-gate", "name": "Second Gate", "category": "Landmarks",
     "lat": 7.5160, "lon": 4.5320, "description": "Alternative University Entrance",
     "keywords": ["second gate", "entrance", "security", "gate"]},
]

SEARCH_SUGGESTIONS = [
    "Faculty of Science",
    "Faculty of Arts",
    "Faculty of Engineering",
    "Library",
    "Health Centre",
    "Great Ife",
    "SUB",
    "Angola Hall",
    "Queens Hall",
    "Sports Complex",
    "Main Gate",
    "Cafeteria",
    "Post Office",
    "Bank",
]
