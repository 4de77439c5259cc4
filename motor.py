# -*- coding: utf-8 -*-
"""
==============================================================================
=== MOTOR DE CÁLCULO DE CTS SEMESTRAL ===
==============================================================================

Este archivo contiene toda la lógica pura de Python para el cálculo de la
Compensación por Tiempo de Servicios (CTS) de un periodo semestral.
No debe contener NINGUNA importación o código de Streamlit (st.).

- Las entradas y el resultado son dataclasses inmutables.
- Cada cálculo es independiente: no se guarda estado entre llamadas.
- Los días se cuentan con el método de 360 días/año y 30 días/mes.
"""

# --- 0. IMPORTACIONES NECESARIAS ---
from __future__ import annotations
import logging
from typing import Dict, Any
from datetime import date
from dateutil.relativedelta import relativedelta
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# --- 1. CONSTANTES GLOBALES ---
# Ley N° 25129 (monto fijo usado para la remuneración computable de CTS)
ASIGNACION_FAMILIAR_CTS = 102.50
# Art. 21, D.S. N° 001-97-TR (TUO Ley de CTS): 1/6 de la gratificación
MESES_SEMESTRE = 6
MESES_POR_ANIO = 12
# Método comercial: 360 días/año, 30 días/mes
DIAS_POR_MES = 30
DIAS_POR_ANIO = 360

# Art. 21, D.S. N° 001-97-TR: depósitos en Mayo (periodo Nov-Abr) y
# Noviembre (periodo May-Oct)
MES_INICIO_SEMESTRE_MAYO = 5
MES_INICIO_SEMESTRE_NOVIEMBRE = 11


# ==============================================================================
# --- 2. ERRORES ---
# ==============================================================================

class ErrorAritmeticaFechas(ValueError):
    """La fecha resultante queda fuera del rango soportado por `datetime.date`."""


# ==============================================================================
# --- 3. CLASES DE DATOS (DATACLASSES) ---
# ==============================================================================

@dataclass(frozen=True)
class EntradasCTS:
    """Datos del trabajador para un cálculo de CTS."""
    fecha_ingreso: date
    inicio_periodo: date
    sueldo_bruto: float = 0.0
    asignacion_familiar: bool = False
    gratificacion: float = 0.0

    @property
    def gratificacion_ordinaria(self) -> float:
        return calcular_gratificacion_ordinaria(self.gratificacion)

    @property
    def fin_periodo(self) -> date:
        return calcular_fin_periodo(self.inicio_periodo)


@dataclass(frozen=True)
class ResultadoCTS:
    """
    Resultado de un cálculo de CTS.

    Los cinco primeros campos son el resultado propiamente dicho; el resto
    son cifras intermedias que el reporte puede mostrar como desglose.
    """
    fin_periodo: date
    meses_computables: int
    dias_computables: int
    remuneracion_computable: float
    cts_total: float
    fecha_inicio_computo: date
    dias_totales: int
    asignacion: float
    gratificacion_ordinaria: float
    valor_mensual: float
    valor_diario: float

    def como_dict(self) -> Dict[str, Any]:
        """Diccionario plano con las fechas en formato ISO (para st.json)."""
        return {
            'fin_periodo': self.fin_periodo.isoformat(),
            'fecha_inicio_computo': self.fecha_inicio_computo.isoformat(),
            'dias_totales': self.dias_totales,
            'meses_computables': self.meses_computables,
            'dias_computables': self.dias_computables,
            'asignacion': self.asignacion,
            'gratificacion_ordinaria': self.gratificacion_ordinaria,
            'remuneracion_computable': self.remuneracion_computable,
            'valor_mensual': self.valor_mensual,
            'valor_diario': self.valor_diario,
            'cts_total': self.cts_total,
        }


# ==============================================================================
# --- 4. FUNCIONES DE FECHAS ---
# ==============================================================================

def calcular_fin_periodo(inicio_periodo: date) -> date:
    """
    Calcula el último día del periodo de cómputo.
    Se suman 5 meses al inicio y se avanza al último día de ese mes, de modo
    que el periodo abarca 6 meses calendario.
    Ej: 15/01/2024 -> 30/06/2024; 29/02/2024 -> 31/07/2024.
    """
    try:
        # day=31 se ajusta al último día del mes resultante
        return inicio_periodo + relativedelta(months=MESES_SEMESTRE - 1, day=31)
    except (ValueError, OverflowError) as e:
        logger.error("Fin de periodo fuera de rango para inicio %s: %s", inicio_periodo, e)
        raise ErrorAritmeticaFechas(
            f"No se puede calcular el fin del periodo para {inicio_periodo.isoformat()}"
        ) from e


def contar_dias_computables(fecha_inicio: date, fecha_fin: date) -> int:
    """
    Cuenta los días entre dos fechas con el método de 360 días/año.
    Se descompone el intervalo en años, meses y días calendario y se
    convierte: años*360 + meses*30 + días.
    El último día del periodo es laborado, por eso se incluye
    (01/01 al 30/06 = 6 meses exactos = 180 días).
    Si el inicio no es anterior al fin, el resultado es 0.
    """
    if fecha_inicio >= fecha_fin:
        return 0
    try:
        fin = fecha_fin + relativedelta(days=1)  # El fin es inclusivo
    except (ValueError, OverflowError) as e:
        logger.error("Fecha fuera de rango al contar días hasta %s: %s", fecha_fin, e)
        raise ErrorAritmeticaFechas(
            f"No se pueden contar los días hasta {fecha_fin.isoformat()}"
        ) from e

    delta = relativedelta(fin, fecha_inicio)
    dias_totales = delta.years * DIAS_POR_ANIO + delta.months * DIAS_POR_MES + delta.days
    return max(dias_totales, 0)


def inicio_periodo_cts(fecha: date) -> date:
    """
    Devuelve el inicio del semestre de CTS que contiene a `fecha`.
    Periodos: 1 Nov - 30 Abr (depósito en Mayo) y 1 May - 31 Oct
    (depósito en Noviembre). Base Legal: Art. 21, D.S. N° 001-97-TR.
    """
    if MES_INICIO_SEMESTRE_MAYO <= fecha.month < MES_INICIO_SEMESTRE_NOVIEMBRE:
        return date(fecha.year, MES_INICIO_SEMESTRE_MAYO, 1)
    if fecha.month < MES_INICIO_SEMESTRE_MAYO:
        return date(fecha.year - 1, MES_INICIO_SEMESTRE_NOVIEMBRE, 1)
    return date(fecha.year, MES_INICIO_SEMESTRE_NOVIEMBRE, 1)


# ==============================================================================
# --- 5. FUNCIONES DE REMUNERACIÓN COMPUTABLE ---
# ==============================================================================

def calcular_asignacion_familiar(aplica: bool) -> float:
    """Asignación familiar fija incluida en la remuneración computable."""
    return ASIGNACION_FAMILIAR_CTS if aplica else 0.0

def calcular_gratificacion_ordinaria(gratificacion: float) -> float:
    """
    1/6 de la gratificación de Julio o Diciembre.
    Base Legal: Art. 19, D.S. N° 001-97-TR.
    """
    return gratificacion / MESES_SEMESTRE


# ==============================================================================
# --- 6. FUNCIÓN PRINCIPAL ---
# ==============================================================================

def calcular_cts(entradas: EntradasCTS) -> ResultadoCTS:
    """
    Calcula la CTS del periodo semestral.
    Base Legal: D.S. N° 001-97-TR (TUO Ley de CTS).

    - No se computa tiempo anterior a la fecha de ingreso.
    - Los meses computables se limitan a 6. Los días computables son el
      residuo de los días totales entre 30 y no se vuelven a ajustar
      después de aplicar el tope de meses.
    """
    fin_periodo = calcular_fin_periodo(entradas.inicio_periodo)
    fecha_inicio_computo = max(entradas.fecha_ingreso, entradas.inicio_periodo)

    dias_totales = contar_dias_computables(fecha_inicio_computo, fin_periodo)
    meses_computables = min(dias_totales // DIAS_POR_MES, MESES_SEMESTRE)
    dias_computables = dias_totales % DIAS_POR_MES

    asignacion = calcular_asignacion_familiar(entradas.asignacion_familiar)
    remuneracion_mensual = entradas.sueldo_bruto + asignacion
    gratificacion_ordinaria = calcular_gratificacion_ordinaria(entradas.gratificacion)
    remuneracion_computable = remuneracion_mensual + gratificacion_ordinaria

    valor_mensual = remuneracion_computable / MESES_POR_ANIO
    valor_diario = valor_mensual / DIAS_POR_MES
    cts_total = (meses_computables * valor_mensual) + (dias_computables * valor_diario)

    logger.debug(
        "CTS %s - %s: %d meses, %d días, RC %.2f, total %.2f",
        fecha_inicio_computo, fin_periodo, meses_computables, dias_computables,
        remuneracion_computable, cts_total,
    )

    return ResultadoCTS(
        fin_periodo=fin_periodo,
        meses_computables=meses_computables,
        dias_computables=dias_computables,
        remuneracion_computable=remuneracion_computable,
        cts_total=cts_total,
        fecha_inicio_computo=fecha_inicio_computo,
        dias_totales=dias_totales,
        asignacion=asignacion,
        gratificacion_ordinaria=gratificacion_ordinaria,
        valor_mensual=valor_mensual,
        valor_diario=valor_diario,
    )
