"""
Persistence adapters.

These modules encapsulate how the collection is stored/retrieved (today a JSON
file). Services and the shell never touch the file format directly.
"""
