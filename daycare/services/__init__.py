"""
High-level use cases for the daycare.

Each service orchestrates domain objects to implement the business rules
(train, breed, sort). The interactive shell calls these services instead of
mutating creatures directly.
"""
