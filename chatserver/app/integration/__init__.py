"""
The `integration` package is the persistence layer of the chat backend.

Only `chatserver.app.controller` may use it. Transport code talks to the
Controller and never imports from here.

Contents
--------
- ChatDAO
    * Creates the users and msgs tables
    * Looks up and updates users
    * Creates, finds and deletes messages
"""
