"""
Service layer abstraction.

``validation`` holds the field rules for user payloads and
``user_store`` owns the in‑memory collection.  Route handlers combine
the two and never touch the collection directly.
"""
