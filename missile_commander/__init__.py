"""A missile-defence arcade game: display-free game rules plus a pygame front end."""

__version__ = "0.1.0"