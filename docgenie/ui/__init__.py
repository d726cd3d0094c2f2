"""NiceGUI interface - thin presentation layer over the DocGenie API.

Responsibilities:
    - View routing between landing, login, signup and chat
    - PDF upload with type and size checks
    - Chat message display while a question is in flight
    - Settings dialog persisting the API key in browser storage

Questions are answered through the HTTP API; view transitions live in
``docgenie.ui.state`` so they can be tested without a browser.
"""
