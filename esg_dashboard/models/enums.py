from enum import Enum


class Pillar(str, Enum):
    ENVIRONMENTAL = "environmental"
    SOCIAL = "social"
    GOVERNANCE = "governance"


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class AlertSeverity(str, Enum):
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


class AuditRunStatus(str, Enum):
    PROCESSING = "processing"
    COMPLETED = "completed"
    COMPLETED_WITH_FINDINGS = "completed-with-findings"
    FAILED = "failed"


class HighlightTone(str, Enum):
    POSITIVE = "positive"
    WARNING = "warning"
    CRITICAL = "critical"


class ValueKind(str, Enum):
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    TEXT = "text"


class DeltaFormat(str, Enum):
    PLAIN = "plain"
    PERCENT = "percent"
    CURRENCY = "currency"


class PanelState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    RUNNING = "running"
    ERROR = "error"


class Indicator(str, Enum):
    """Closed vocabulary of indicator keys, valued as the API spells them."""

    # Environmental
    ENERGIA_KWH = "energiaKwh"
    PORCENTAJE_RENOVABLE = "porcentajeRenovable"
    EMISIONES_CO2 = "emisionesCO2"
    EMISIONES_ALCANCE_1 = "emisionesAlcance1"
    EMISIONES_ALCANCE_2 = "emisionesAlcance2"
    EMISIONES_ALCANCE_3 = "emisionesAlcance3"
    AGUA_M3 = "aguaM3"
    AGUA_RECICLADA_PORC = "aguaRecicladaPorc"
    AGUA_REUTILIZADA_PORC = "aguaReutilizadaPorc"
    RESIDUOS_PELIGROSOS_TON = "residuosPeligrososTon"
    RECICLAJE_PORC = "reciclajePorc"
    INTENSIDAD_ENERGETICA = "intensidadEnergetica"
    RESIDUOS_VALORIZADOS_PORC = "residuosValorizadosPorc"
    INCIDENTES_AMBIENTALES = "incidentesAmbientales"
    SANCIONES_AMBIENTALES = "sancionesAmbientales"
    AUDITORIAS_AMBIENTALES = "auditoriasAmbientales"
    PERMISOS_AMBIENTALES_AL_DIA = "permisosAmbientalesAlDia"
    PROYECTOS_BIODIVERSIDAD = "proyectosBiodiversidad"
    PLAN_MITIGACION_AMBIENTAL = "planMitigacionAmbiental"

    # Social
    PORCENTAJE_MUJERES = "porcentajeMujeres"
    DIVERSIDAD_GENERO_PORC = "diversidadGeneroPorc"
    HORAS_CAPACITACION = "horasCapacitacion"
    ACCIDENTES_LABORALES = "accidentesLaborales"
    TASA_FRECUENCIA_ACCIDENTES = "tasaFrecuenciaAccidentes"
    TASA_ROTACION = "tasaRotacion"
    INDICE_SATISFACCION = "indiceSatisfaccion"
    HORAS_VOLUNTARIADO = "horasVoluntariado"
    PROVEEDORES_LOCALES_PORC = "proveedoresLocalesPorc"
    PARTICIPACION_COMUNIDAD = "participacionComunidad"
    INVERSION_COMUNIDAD_USD = "inversionComunidadUsd"
    PROGRAMAS_BIENESTAR_ACTIVOS = "programasBienestarActivos"
    SATISFACCION_CLIENTES_PORC = "satisfaccionClientesPorc"
    EVALUACIONES_PROVEEDORES_SOSTENIBLES_PORC = "evaluacionesProveedoresSosteniblesPorc"
    CAPACITACION_DERECHOS_HUMANOS_PORC = "capacitacionDerechosHumanosPorc"
    POLITICA_DERECHOS_HUMANOS = "politicaDerechosHumanos"

    # Governance
    CUMPLIMIENTO_NORMATIVO = "cumplimientoNormativo"
    POLITICAS_ANTICORRUPCION = "politicasAnticorrupcion"
    AUDITADO_POR_TERCEROS = "auditadoPorTerceros"
    NIVEL_TRANSPARENCIA = "nivelTransparencia"
    PORCENTAJE_DIRECTORES_INDEPENDIENTES = "porcentajeDirectoresIndependientes"
    DIVERSIDAD_DIRECTORIO_PORC = "diversidadDirectorioPorc"
    COMITE_SOSTENIBILIDAD = "comiteSostenibilidad"
    EVALUACION_ETICA_ANUAL = "evaluacionEticaAnual"
    REUNIONES_STAKEHOLDERS = "reunionesStakeholders"
    CANAL_DENUNCIAS_ACTIVO = "canalDenunciasActivo"
    POLITICA_REMUNERACION_ESG = "politicaRemuneracionEsg"
    EVALUACION_RIESGOS_ESG_TRIMESTRAL = "evaluacionRiesgosEsgTrimestral"
    CAPACITACION_GOBIERNO_ESG_PORC = "capacitacionGobiernoEsgPorc"
    AUDITORIAS_COMPLIANCE = "auditoriasCompliance"
    REPORTE_SOSTENIBILIDAD_VERIFICADO = "reporteSostenibilidadVerificado"
    RELACION_STAKEHOLDERS_CLAVE = "relacionStakeholdersClave"
