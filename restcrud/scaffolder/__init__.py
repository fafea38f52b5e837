"""restcrud scaffolder -- writes an Express + Mongoose CRUD API project.

Quick usage::

    from restcrud.scaffolder import CrudApiGenerator
    from restcrud.config import ScaffoldConfig

    generator = CrudApiGenerator(ScaffoldConfig(root_dir="/tmp/my-api"))
    report = generator.generate()
"""

from restcrud.scaffolder.generator import (
    CrudApiGenerator,
    ScaffoldReport,
    generate_crud_api,
)
from restcrud.scaffolder.templates import TemplateRenderer

__all__ = [
    "CrudApiGenerator",
    "ScaffoldReport",
    "TemplateRenderer",
    "generate_crud_api",
]
