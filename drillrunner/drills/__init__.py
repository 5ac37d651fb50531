"""Worked solutions: basics, errors, text, mappings, traits, records and concurrency."""