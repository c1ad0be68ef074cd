"""
Service layer abstraction.

Services sit between the HTTP handlers and the storage adapter.  They
move blocking driver calls off the event loop and translate driver
failures into API errors, so handlers only deal with plain results.
"""
