"""Núcleo de gestión de clínicas: agendamientos, pacientes y clínicas."""

__version__ = "0.1.0"
