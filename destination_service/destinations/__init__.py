"""
Destinations Module
===================

Bounded context for destination records.

Responsibilities:
- List stored destinations, newest first
- Create a destination enriched with capital, population and region from
  the country-information service
- Delete a destination by id
"""
