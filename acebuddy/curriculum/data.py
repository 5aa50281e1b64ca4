"""
Authored Curriculum Data

Sparse, hand-authored syllabus topics per (country, exam level, subject) and
the ordered exam levels offered in each country. Only combinations with real
content appear here; ``acebuddy.curriculum.catalog`` expands this into a
total lookup table.

Topic order matters: it is the order shown to students and the order the
first-topic default is taken from.
"""

from acebuddy.schemas.base import Country, ExamLevel, Subject

# Fallback topic for the "Other" subject when nothing is authored
GENERAL_TOPICS = "General Topics"

HOMEWORK_TOPICS: tuple[str, ...] = (
    "Math problem solving",
    "Essay writing tips",
    "Science project ideas",
    "History event explanations",
    "General study questions",
)


EXAM_LEVELS_BY_COUNTRY: dict[Country, list[ExamLevel]] = {
    Country.UK: [
        ExamLevel.PRIMARY,
        ExamLevel.KEYSTAGE3,
        ExamLevel.GCSE,
        ExamLevel.ALEVEL,
        ExamLevel.OTHER,
    ],
    Country.NIGERIA: [
        ExamLevel.JUNIOR_WAEC,
        ExamLevel.JUNIOR_NECO,
        ExamLevel.WAEC,
        ExamLevel.NECO,
        ExamLevel.JAMB,
        ExamLevel.OTHER,
    ],
    Country.USA: [
        ExamLevel.SAT,
        ExamLevel.ACT,
        ExamLevel.AP,
        ExamLevel.GENERIC_HIGH_SCHOOL,
        ExamLevel.OTHER,
    ],
    Country.INDIA: [
        ExamLevel.CBSE,
        ExamLevel.ICSE,
        ExamLevel.JEE_NEET,
        ExamLevel.OTHER,
    ],
    Country.GLOBAL: [
        ExamLevel.GENERIC_HIGH_SCHOOL,
        ExamLevel.GENERIC_UNIVERSITY_ENTRANCE,
        ExamLevel.OTHER,
    ],
}

# Level picked when the current selection is not offered in a country
PREFERRED_EXAM_LEVELS: dict[Country, ExamLevel] = {
    Country.UK: ExamLevel.GCSE,
    Country.NIGERIA: ExamLevel.JUNIOR_WAEC,
    Country.USA: ExamLevel.GENERIC_HIGH_SCHOOL,
    Country.INDIA: ExamLevel.CBSE,
}


AUTHORED_TOPICS: dict[Country, dict[ExamLevel, dict[Subject, list[str]]]] = {
    # =========================================================================
    # UNITED KINGDOM
    # =========================================================================
    Country.UK: {
        ExamLevel.PRIMARY: {
            Subject.MATH: ["Counting & Numbers", "Basic Shapes", "Addition & Subtraction", "Time & Money"],
            Subject.ENGLISH: ["Phonics", "Story Writing Basics", "Reading Comprehension (Primary)", "Alphabet & Spelling"],
            Subject.SCIENCE: ["Plants & Animals", "Weather", "Human Body Basics", "Materials"],
            Subject.HISTORY: ["Local History", "Famous People (UK)", "Historical Events (Simple)"],
            Subject.GEOGRAPHY: ["Maps & Globes (Primary)", "UK Geography Basics", "Environments"],
        },
        ExamLevel.KEYSTAGE3: {
            Subject.MATH: ["Algebra Fundamentals", "Geometry & Measure", "Ratio & Proportion", "Probability"],
            Subject.ENGLISH: ["Literary Analysis (KS3)", "Creative Writing (Narrative)", "Argumentative Writing", "Poetry Analysis"],
            Subject.SCIENCE: ["Cells & Systems (Biology)", "Atomic Structure (Chemistry)", "Forces & Motion (Physics)", "Ecosystems"],
            Subject.HISTORY: ["Medieval England", "British Empire", "World Wars Overview", "Industrial Revolution"],
            Subject.GEOGRAPHY: ["Plate Tectonics", "Rivers & Coasts", "Population & Migration", "Global Development"],
            Subject.COMPUTING: ["Programming with Python", "Computational Thinking", "Networking Basics", "Cyber Security"],
        },
        ExamLevel.GCSE: {
            Subject.MATH: ["Algebra (Advanced)", "Quadratic Equations", "Trigonometry", "Statistics & Probability (GCSE)"],
            Subject.ENGLISH: ["Shakespeare Study", "Modern Texts Analysis", "Unseen Poetry", "Transactional Writing"],
            Subject.SCIENCE: ["Cell Biology & Disease", "Organic Chemistry", "Electricity & Magnetism (Physics)", "Genetic Inheritance"],
            Subject.HISTORY: ["Norman Conquest", "Cold War (GCSE)", "Germany 1918-1939", "Elizabethan England"],
            Subject.GEOGRAPHY: ["Hazardous Earth", "Urban Issues & Challenges", "Changing Economic World", "Resource Management"],
            Subject.COMPUTING: ["Algorithms & Data Structures", "Logic Gates", "Computer Systems", "Ethical Hacking Basics"],
            Subject.BUSINESS: ["Business Operations", "Marketing Mix", "Financial Performance", "Business in the Global Economy"],
            Subject.LANGUAGES: ["French: Daily Life", "Spanish: Free Time", "German: Future Plans", "Grammar & Vocabulary"],
        },
        ExamLevel.ALEVEL: {
            Subject.MATH: ["Pure Mathematics (Calculus, Functions)", "Statistics (Hypothesis Testing)", "Mechanics (Forces, Kinematics)"],
            Subject.ENGLISH: ["Critical Literary Theory", "Genre Studies", "Shakespeare: In-depth", "Creative Writing Portfolio"],
            Subject.SCIENCE: ["Advanced Cell Biology", "Physical Chemistry", "Quantum Physics", "Genetics & Evolution"],
            Subject.HISTORY: ["Early Modern Britain", "Russian Revolution", "USA Civil Rights", "European Integration"],
            Subject.GEOGRAPHY: ["Water & Carbon Cycles", "Geophysical Hazards", "Changing Places", "Global Governance"],
            Subject.COMPUTING: ["Object-Oriented Programming", "Data Structures & Algorithms", "Databases", "Networking Advanced"],
            Subject.ECONOMICS: ["Microeconomics", "Macroeconomics", "Global Economy", "Government Intervention"],
        },
        ExamLevel.OTHER: {
            Subject.MATH: ["General Math Topics"],
            Subject.ENGLISH: ["General English Topics"],
            Subject.SCIENCE: ["General Science Topics"],
        },
    },
    # =========================================================================
    # NIGERIA
    # =========================================================================
    Country.NIGERIA: {
        ExamLevel.JUNIOR_WAEC: {
            Subject.MATH: ["Basic Algebra", "Fractions & Decimals", "Mensuration", "Statistics (Basic)"],
            Subject.ENGLISH: ["Reading Skills", "Essay Writing (Junior)", "Grammar & Punctuation", "Spelling"],
            Subject.SCIENCE: ["Basic Biology", "Basic Chemistry", "Basic Physics", "Health Education"],
        },
        ExamLevel.JUNIOR_NECO: {
            Subject.MATH: ["Number Bases", "Approximation", "Set Theory", "Algebraic Fractions"],
            Subject.ENGLISH: ["Comprehension", "Composition", "Tenses", "Parts of Speech"],
            Subject.SCIENCE: ["Matter", "Energy", "Living Things", "Environment"],
        },
        ExamLevel.WAEC: {
            Subject.MATH: ["Calculus (WAEC)", "Vectors (WAEC)", "Probability & Statistics (WAEC)", "Trigonometry (WAEC)"],
            Subject.ENGLISH: ["Summary Writing", "Letter Writing", "Comprehension & Lexis", "Oral English"],
            Subject.SCIENCE: ["Human Physiology", "Organic Chemistry (WAEC)", "Electricity & Waves (Physics)", "Ecology"],
            Subject.HISTORY: ["Nigerian History", "West African History", "World History (WAEC)"],
            Subject.GEOGRAPHY: ["Map Reading (WAEC)", "Population Geography", "Climatology (WAEC)", "Economic Geography"],
        },
        ExamLevel.NECO: {
            Subject.MATH: ["Coordinate Geometry", "Differentiation", "Integration", "Sequences & Series"],
            Subject.ENGLISH: ["Literary Appreciation", "Idioms", "Phonetics", "Speech Writing"],
            Subject.SCIENCE: ["Ecology", "Genetics", "Electrolysis", "Nuclear Physics"],
        },
        ExamLevel.JAMB: {
            Subject.MATH: ["JAMB Algebra", "JAMB Calculus", "JAMB Statistics"],
            Subject.ENGLISH: ["JAMB Comprehension", "JAMB Lexis & Structure"],
            Subject.SCIENCE: ["JAMB Biology", "JAMB Chemistry", "JAMB Physics"],
        },
        ExamLevel.OTHER: {
            Subject.MATH: ["General Math Topics (Nigeria)"],
            Subject.ENGLISH: ["General English Topics (Nigeria)"],
        },
    },
    # =========================================================================
    # UNITED STATES
    # =========================================================================
    Country.USA: {
        ExamLevel.GENERIC_HIGH_SCHOOL: {
            Subject.MATH: ["Algebra I", "Geometry", "Algebra II", "Pre-Calculus"],
            Subject.ENGLISH: ["American Literature", "World Literature", "Composition & Rhetoric"],
            Subject.SCIENCE: ["Biology", "Chemistry", "Physics"],
            Subject.HISTORY: ["US History", "World History"],
        },
        ExamLevel.SAT: {
            Subject.MATH: ["SAT Algebra", "SAT Problem Solving & Data Analysis", "SAT Passport to Advanced Math"],
            Subject.ENGLISH: ["SAT Reading Comprehension", "SAT Writing & Language"],
        },
        ExamLevel.ACT: {
            Subject.MATH: ["ACT Algebra", "ACT Geometry", "ACT Trigonometry"],
            Subject.ENGLISH: ["ACT English", "ACT Reading"],
            Subject.SCIENCE: ["ACT Science Reasoning"],
        },
        ExamLevel.AP: {
            Subject.MATH: ["AP Calculus AB", "AP Statistics"],
            Subject.ENGLISH: ["AP English Language", "AP English Literature"],
            Subject.SCIENCE: ["AP Biology", "AP Chemistry", "AP Physics"],
            Subject.HISTORY: ["AP US History", "AP World History", "AP European History"],
        },
        ExamLevel.OTHER: {
            Subject.MATH: ["General Math Topics (USA)"],
        },
    },
    # =========================================================================
    # INDIA
    # =========================================================================
    Country.INDIA: {
        ExamLevel.CBSE: {
            Subject.MATH: ["CBSE Algebra", "CBSE Geometry", "CBSE Calculus"],
            Subject.ENGLISH: ["CBSE Reading", "CBSE Writing", "CBSE Grammar"],
            Subject.SCIENCE: ["CBSE Physics", "CBSE Chemistry", "CBSE Biology"],
        },
        ExamLevel.ICSE: {
            Subject.MATH: ["ICSE Algebra", "ICSE Geometry", "ICSE Trigonometry"],
            Subject.ENGLISH: ["ICSE Language", "ICSE Literature"],
            Subject.SCIENCE: ["ICSE Physics", "ICSE Chemistry", "ICSE Biology"],
        },
        ExamLevel.JEE_NEET: {
            Subject.MATH: ["JEE Math", "JEE Physics", "JEE Chemistry"],
            Subject.SCIENCE: ["NEET Biology", "NEET Physics", "NEET Chemistry"],
        },
        ExamLevel.OTHER: {
            Subject.MATH: ["General Math Topics (India)"],
        },
    },
    # =========================================================================
    # GLOBAL / INTERNATIONAL
    # =========================================================================
    Country.GLOBAL: {
        ExamLevel.GENERIC_HIGH_SCHOOL: {
            Subject.MATH: ["Fundamentals of Algebra", "Introduction to Geometry", "Probability Basics"],
            Subject.ENGLISH: ["Paragraph Structure", "Descriptive Writing", "Grammar Essentials"],
            Subject.SCIENCE: ["Basic Scientific Method", "Matter & Energy", "Life Cycles"],
        },
        ExamLevel.GENERIC_UNIVERSITY_ENTRANCE: {
            Subject.MATH: ["Advanced Algebra", "Pre-Calculus Concepts", "Statistics for Exams"],
            Subject.ENGLISH: ["Essay Argumentation", "Critical Reading", "Vocabulary Building"],
            Subject.SCIENCE: ["Advanced Biology", "Advanced Chemistry", "Advanced Physics"],
        },
        ExamLevel.OTHER: {
            Subject.MATH: ["Miscellaneous Math Topics"],
            Subject.ENGLISH: ["Miscellaneous English Topics"],
            Subject.SCIENCE: ["Miscellaneous Science Topics"],
        },
    },
}
