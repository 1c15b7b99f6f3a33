"""
Worked examples of the composers.

- csv_rows: sequential composition with optional printing taps
- company: optional chaining over lookups that can come up empty
- work_hours: adapting a multi-argument function with a closure
"""
