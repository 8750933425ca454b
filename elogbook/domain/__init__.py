"""
Domain layer: download authorization, journal entries, events and errors.
"""
