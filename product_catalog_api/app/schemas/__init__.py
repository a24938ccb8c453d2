"""
Pydantic schema definitions and query specifications.

Product request and response bodies live in ``product``; the parsed
filter, sort and page parameters of the listing endpoint live in
``query``.
"""
