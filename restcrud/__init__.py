"""restcrud -- scaffolds a starter Express + MongoDB CRUD API for a User resource."""

__version__ = "0.1.0"
