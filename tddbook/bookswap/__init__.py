"""Book-swapping WSGI service: models, in-memory and SQLite storage, handlers and server."""