"""
Capa de Infraestructura - Sistema de Clínicas.

Adaptadores de los puertos definidos en la capa de aplicación:
- in_memory/: Repositorios en memoria
- services/: Reloj, autenticación, auditoría y sanitización
"""
