"""Fixed example data written by the admin scripts."""

# (name, code, enabled, notes)
EXAMPLE_DESKS = (
    ("Desk by Window", "A1", True, "Great natural lighting, overlooking the garden"),
    ("Standing Desk", "B2", True, "Height adjustable, ergonomic setup with monitor arm"),
    ("Conference Room Desk", "C3", True, "Private space for calls and meetings"),
    ("Quiet Zone Desk", "D4", False, "Currently under maintenance - will be available next week"),
)

# (first name, last name, age)
SAMPLE_USERS = (
    ("Jan", "Kowalski", 28),
    ("Anna", "Nowak", 34),
    ("Piotr", "Wiśniewski", 22),
    ("Maria", "Wójcik", 41),
    ("Tomasz", "Kowalczyk", 29),
    ("Katarzyna", "Kamińska", 26),
    ("Michał", "Lewandowski", 35),
    ("Magdalena", "Zielińska", 31),
    ("Paweł", "Szymański", 27),
    ("Agnieszka", "Woźniak", 33),
)

__all__ = ["EXAMPLE_DESKS", "SAMPLE_USERS"]
