"""
Backend feature modules.

- auth: credential store, bearer tokens, /signup /login /protected
- guide: country guide generation, /api/country-guide

Each module keeps its Protocols in interfaces.py and its wiring in a
`create_*_service()` factory; api/dependencies.py only calls those factories.
"""
