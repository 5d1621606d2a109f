"""
Test suite for the state container.

Focus areas:
- Initial notification and reduction correctness
- Unsubscribe semantics
- Thunk dispatch (sync and executor-backed)
- Reentrant dispatch ordering
- Projections and connections
"""
