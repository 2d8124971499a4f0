"""Volunteer Log Source Package.

Registers volunteers and tracks the hours they work.

Layers:
    - core: Configuration, logging, exceptions
    - db: Volunteer records and the flat-file store
    - gui: User interface
"""

__version__ = "0.1.0"
