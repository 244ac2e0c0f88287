"""Domain model: creatures, species, genders and their rules."""
