"""
msgcomponents.types
~~~~~~~~~~~~~~~~~~~

Typings for the chat platform's component payloads.
"""
