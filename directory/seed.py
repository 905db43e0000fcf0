# seed.py - the fixed advocate listing served by the built-in endpoint
from typing import Tuple

from directory.models import Advocate

SPECIALTIES = (
    "Bipolar",
    "LGBTQ",
    "Medication/Prescribing",
    "Suicide History/Attempts",
    "General Mental Health (anxiety, depression, stress, grief, life transitions)",
    "Men's issues",
    "Relationship Issues (family, friends, couple, etc)",
    "Trauma & PTSD",
    "Personality disorders",
    "Personal growth",
    "Substance use/abuse",
    "Pediatrics",
    "Women's issues (post-partum, infertility, family planning)",
    "Chronic pain",
    "Weight loss & nutrition",
    "Eating disorders",
    "Diabetic Diet and nutrition",
    "Coaching (leadership, career, academic and wellness)",
    "Life coaching",
    "Obsessive-compulsive disorders",
    "Neuropsychological evaluations & testing (ADHD testing)",
    "Attention and Hyperactivity (ADHD)",
    "Sleep issues",
    "Schizophrenia and psychotic disorders",
    "Learning disorders",
    "Domestic abuse",
    "Cardiology",
)

_ROWS = (
    ("John", "Doe", "New York", "MD", (0, 5, 26), 10, "5551234567"),
    ("Jane", "Smith", "Los Angeles", "PhD", (1, 7), 8, "5559876543"),
    ("Alice", "Johnson", "Chicago", "MSW", (4, 9, 18), 5, "5554567890"),
    ("Michael", "Brown", "Houston", "MD", (2, 13, 26), 12, "5556543210"),
    ("Emily", "Davis", "Phoenix", "PhD", (6, 10), 7, "5553210987"),
    ("Chris", "Martinez", "Philadelphia", "MSW", (10, 11, 24), 9, "5557890123"),
    ("Jessica", "Taylor", "San Antonio", "MD", (12, 14), 11, "5554561234"),
    ("David", "Harris", "San Diego", "PhD", (15, 16, 22), 6, "5557896543"),
    ("Laura", "Clark", "Dallas", "MSW", (3, 8, 25), 4, "5550123456"),
    ("Daniel", "Lewis", "San Jose", "MD", (19, 20), 13, "5553217654"),
    ("Sarah", "Lee", "Austin", "PhD", (21, 23), 10, "5551238765"),
    ("James", "King", "Jacksonville", "MSW", (17, 18), 5, "5556540987"),
    ("Megan", "Green", "San Francisco", "MD", (0, 2, 4), 14, "5559873456"),
    ("Joshua", "Walker", "Columbus", "PhD", (7, 9), 9, "5556781234"),
    ("Amanda", "Hall", "Fort Worth", "MSW", (5, 11), 3, "5559872345"),
    ("Ryan", "Wright", "Boston", "MD", (26, 13), 16, "5551112222"),
)


def seed_advocates() -> Tuple[Advocate, ...]:
    return tuple(
        Advocate(
            id=index,
            first_name=first,
            last_name=last,
            city=city,
            degree=degree,
            specialties=tuple(SPECIALTIES[i] for i in specialty_ids),
            years_of_experience=years,
            phone_number=phone,
        )
        for index, (first, last, city, degree, specialty_ids, years, phone) in enumerate(_ROWS, start=1)
    )
