"""Indicator catalogue for the three ESG pillars.

Bounds mirror the metric form validation: percentages are 0-100, counts
are non-negative integers, text fields are capped at 500 characters.
"""

from esg_dashboard.indicators.registry import register_indicator
from esg_dashboard.models.enums import Indicator as Ind
from esg_dashboard.models.enums import Pillar, ValueKind

_ENV = Pillar.ENVIRONMENTAL
_SOC = Pillar.SOCIAL
_GOV = Pillar.GOVERNANCE

_NUM = ValueKind.NUMERIC
_BOOL = ValueKind.BOOLEAN
_TEXT = ValueKind.TEXT


# Environmental
register_indicator(Ind.ENERGIA_KWH, _ENV, _NUM, "Consumo energético", unit="kWh", minimum=0)
register_indicator(Ind.PORCENTAJE_RENOVABLE, _ENV, _NUM, "Energía renovable", unit="%", minimum=0, maximum=100)
register_indicator(Ind.EMISIONES_CO2, _ENV, _NUM, "Emisiones CO₂", unit="t", minimum=0)
register_indicator(Ind.EMISIONES_ALCANCE_1, _ENV, _NUM, "Emisiones Alcance 1", unit="t", minimum=0)
register_indicator(Ind.EMISIONES_ALCANCE_2, _ENV, _NUM, "Emisiones Alcance 2", unit="t", minimum=0)
register_indicator(Ind.EMISIONES_ALCANCE_3, _ENV, _NUM, "Emisiones Alcance 3", unit="t", minimum=0)
register_indicator(Ind.AGUA_M3, _ENV, _NUM, "Consumo de agua", unit="m³", minimum=0)
register_indicator(Ind.AGUA_RECICLADA_PORC, _ENV, _NUM, "Agua reciclada", unit="%", minimum=0, maximum=100)
register_indicator(Ind.AGUA_REUTILIZADA_PORC, _ENV, _NUM, "Agua reutilizada", unit="%", minimum=0, maximum=100)
register_indicator(Ind.RESIDUOS_PELIGROSOS_TON, _ENV, _NUM, "Residuos peligrosos", unit="t", minimum=0)
register_indicator(Ind.RECICLAJE_PORC, _ENV, _NUM, "Reciclaje", unit="%", minimum=0, maximum=100)
register_indicator(Ind.INTENSIDAD_ENERGETICA, _ENV, _NUM, "Intensidad energética", minimum=0)
register_indicator(Ind.RESIDUOS_VALORIZADOS_PORC, _ENV, _NUM, "Residuos valorizados", unit="%", minimum=0, maximum=100)
register_indicator(Ind.INCIDENTES_AMBIENTALES, _ENV, _NUM, "Incidentes ambientales", minimum=0, integer=True)
register_indicator(Ind.SANCIONES_AMBIENTALES, _ENV, _NUM, "Sanciones ambientales", minimum=0, integer=True)
register_indicator(Ind.AUDITORIAS_AMBIENTALES, _ENV, _NUM, "Auditorías ambientales", minimum=0, integer=True)
register_indicator(Ind.PERMISOS_AMBIENTALES_AL_DIA, _ENV, _BOOL, "Permisos ambientales al día")
register_indicator(Ind.PROYECTOS_BIODIVERSIDAD, _ENV, _TEXT, "Proyectos de biodiversidad")
register_indicator(Ind.PLAN_MITIGACION_AMBIENTAL, _ENV, _TEXT, "Plan de mitigación ambiental")

# Social
register_indicator(Ind.PORCENTAJE_MUJERES, _SOC, _NUM, "Mujeres en liderazgo", unit="%", minimum=0, maximum=100)
register_indicator(Ind.DIVERSIDAD_GENERO_PORC, _SOC, _NUM, "Diversidad de género", unit="%", minimum=0, maximum=100)
register_indicator(Ind.HORAS_CAPACITACION, _SOC, _NUM, "Horas de capacitación", unit="h", minimum=0)
register_indicator(Ind.ACCIDENTES_LABORALES, _SOC, _NUM, "Accidentes laborales", minimum=0, integer=True)
register_indicator(Ind.TASA_FRECUENCIA_ACCIDENTES, _SOC, _NUM, "Tasa de frecuencia de accidentes", minimum=0)
register_indicator(Ind.TASA_ROTACION, _SOC, _NUM, "Tasa de rotación", unit="%", minimum=0, maximum=100)
register_indicator(Ind.INDICE_SATISFACCION, _SOC, _NUM, "Índice de satisfacción", unit="%", minimum=0, maximum=100)
register_indicator(Ind.HORAS_VOLUNTARIADO, _SOC, _NUM, "Horas de voluntariado", unit="h", minimum=0)
register_indicator(Ind.PROVEEDORES_LOCALES_PORC, _SOC, _NUM, "Proveedores locales", unit="%", minimum=0, maximum=100)
register_indicator(Ind.PARTICIPACION_COMUNIDAD, _SOC, _TEXT, "Participación en la comunidad")
register_indicator(Ind.INVERSION_COMUNIDAD_USD, _SOC, _NUM, "Inversión en comunidad", unit="USD", minimum=0)
register_indicator(Ind.PROGRAMAS_BIENESTAR_ACTIVOS, _SOC, _NUM, "Programas de bienestar activos", minimum=0, integer=True)
register_indicator(Ind.SATISFACCION_CLIENTES_PORC, _SOC, _NUM, "Satisfacción de clientes", unit="%", minimum=0, maximum=100)
register_indicator(
    Ind.EVALUACIONES_PROVEEDORES_SOSTENIBLES_PORC, _SOC, _NUM,
    "Evaluaciones a proveedores sostenibles", unit="%", minimum=0, maximum=100,
)
register_indicator(
    Ind.CAPACITACION_DERECHOS_HUMANOS_PORC, _SOC, _NUM,
    "Capacitación en derechos humanos", unit="%", minimum=0, maximum=100,
)
register_indicator(Ind.POLITICA_DERECHOS_HUMANOS, _SOC, _BOOL, "Política de derechos humanos")

# Governance
register_indicator(Ind.CUMPLIMIENTO_NORMATIVO, _GOV, _NUM, "Cumplimiento normativo", unit="%", minimum=0, maximum=100)
register_indicator(Ind.POLITICAS_ANTICORRUPCION, _GOV, _BOOL, "Políticas anticorrupción")
register_indicator(Ind.AUDITADO_POR_TERCEROS, _GOV, _BOOL, "Auditado por terceros")
register_indicator(Ind.NIVEL_TRANSPARENCIA, _GOV, _NUM, "Nivel de transparencia", unit="%", minimum=0, maximum=100)
register_indicator(
    Ind.PORCENTAJE_DIRECTORES_INDEPENDIENTES, _GOV, _NUM,
    "Directores independientes", unit="%", minimum=0, maximum=100,
)
register_indicator(Ind.DIVERSIDAD_DIRECTORIO_PORC, _GOV, _NUM, "Diversidad en directorio", unit="%", minimum=0, maximum=100)
register_indicator(Ind.COMITE_SOSTENIBILIDAD, _GOV, _BOOL, "Comité de sostenibilidad")
register_indicator(Ind.EVALUACION_ETICA_ANUAL, _GOV, _BOOL, "Evaluación ética anual")
register_indicator(Ind.REUNIONES_STAKEHOLDERS, _GOV, _NUM, "Reuniones con stakeholders", minimum=0, integer=True)
register_indicator(Ind.CANAL_DENUNCIAS_ACTIVO, _GOV, _BOOL, "Canal de denuncias activo")
register_indicator(Ind.POLITICA_REMUNERACION_ESG, _GOV, _BOOL, "Política de remuneración ESG")
register_indicator(Ind.EVALUACION_RIESGOS_ESG_TRIMESTRAL, _GOV, _BOOL, "Evaluación trimestral de riesgos ESG")
register_indicator(
    Ind.CAPACITACION_GOBIERNO_ESG_PORC, _GOV, _NUM,
    "Capacitación ESG del directorio", unit="%", minimum=0, maximum=100,
)
register_indicator(Ind.AUDITORIAS_COMPLIANCE, _GOV, _NUM, "Auditorías de compliance", minimum=0, integer=True)
register_indicator(Ind.REPORTE_SOSTENIBILIDAD_VERIFICADO, _GOV, _BOOL, "Reporte de sostenibilidad verificado")
register_indicator(Ind.RELACION_STAKEHOLDERS_CLAVE, _GOV, _TEXT, "Relación con stakeholders clave")
