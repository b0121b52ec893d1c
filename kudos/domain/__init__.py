"""
Domain Layer
============

Kudos entities, closed enumerations and typed errors.
Nothing here imports FastAPI or pymongo.

Contains:
- Models: Team, Comment, Reaction, User, KudosCard and analytics rows
- Repository Interfaces: Async contracts implemented by the MongoDB layer
- Exceptions: KudosError hierarchy, each error tagged with an ErrorKind
"""
