"""
Service layer.

``product_store`` owns the catalogue; ``query_engine`` and ``paginator``
are pure functions over snapshots taken from it.  Route handlers combine
the three and never touch the collection directly.
"""
