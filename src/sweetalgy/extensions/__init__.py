"""Fluent extension helpers for arbitrary values and iterables.

Each helper is a plain function that takes its receiver as the first
positional argument, so call sites read the same as chained method calls
would in languages with extension methods:

- ``sequences``: emptiness checks, duplicate detection and absent-item
  counting over iterables.
- ``fluent``: conditional actions and null-coalescing for any value.

Helpers are stateless and safe to call from independent threads on
independent inputs. Import them from their defining modules.
"""
