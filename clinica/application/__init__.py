"""
Capa de Aplicación - Sistema de Clínicas.

Esta capa contiene los casos de uso, DTOs, validadores e interfaces (puertos).
Orquesta la lógica de negocio y define los contratos con la infraestructura.

Estructura:
- use_cases/: Casos de uso (appointment, patient, clinic)
- dtos/: Data Transfer Objects y paginación
- interfaces/: Puertos (repositorios y servicios)
- schemas/: Schemas Pydantic de entrada
- validators/: Validadores que envuelven los schemas
"""
