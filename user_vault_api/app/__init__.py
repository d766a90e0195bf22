"""
Application package initializer.

The service is organised in layers, leaf first: ``core`` holds the
date/age and validation policies together with configuration, logging
and store bootstrap; ``repositories`` implements the persistence
gateway; ``services`` orchestrates one operation per CRUD verb; and
``api`` exposes those operations over HTTP.  ``main`` wires the layers
together.
"""
