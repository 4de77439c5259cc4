# -*- coding: utf-8 -*-
"""
Helpers del formulario de CTS (sin Streamlit).

Convierte el texto ingresado por el usuario en `EntradasCTS` y prepara el
`ResultadoCTS` para mostrarlo en pantalla. La interfaz (main.py) solo llama
a estas funciones y al motor.
"""

from __future__ import annotations
import logging
import math
import re
from enum import Enum
from typing import Dict, Optional
from datetime import date

import pandas as pd

from motor import EntradasCTS, ResultadoCTS

logger = logging.getLogger(__name__)

SIMBOLO_MONEDA = "S/."

# "S/", "S/." o "S/ ." al inicio del monto
_PATRON_SIMBOLO = re.compile(r'^S/\s*\.?\s*', re.IGNORECASE)


# ==============================================================================
# --- 1. LECTURA DE MONTOS ---
# ==============================================================================

def parsear_monto(texto: Optional[str]) -> float:
    """
    Convierte el texto de un campo de monto en float.
    Acepta el símbolo "S/." y separadores de miles con coma
    (ej. "S/. 3,000.50" -> 3000.5).
    Un texto vacío o no numérico se toma como 0.0; nunca lanza excepción.
    """
    if texto is None:
        return 0.0
    limpio = _PATRON_SIMBOLO.sub('', str(texto).strip()).replace(',', '').strip()
    if not limpio:
        return 0.0
    try:
        monto = float(limpio)
    except ValueError:
        logger.debug("Monto no numérico %r, se usa 0.0", texto)
        return 0.0
    # float() acepta "nan" e "inf"
    if not math.isfinite(monto):
        logger.debug("Monto no finito %r, se usa 0.0", texto)
        return 0.0
    return monto


def construir_entradas(
    fecha_ingreso: date,
    inicio_periodo: date,
    sueldo_texto: Optional[str],
    asignacion_familiar: bool,
    gratificacion_texto: Optional[str]
) -> EntradasCTS:
    """Arma las entradas del motor a partir de los valores del formulario."""
    return EntradasCTS(
        fecha_ingreso=fecha_ingreso,
        inicio_periodo=inicio_periodo,
        sueldo_bruto=parsear_monto(sueldo_texto),
        asignacion_familiar=bool(asignacion_familiar),
        gratificacion=parsear_monto(gratificacion_texto)
    )


# ==============================================================================
# --- 2. TEMAS DE LA APLICACIÓN ---
# ==============================================================================

class Tema(Enum):
    """Preferencia de tema. Solo afecta la presentación, nunca el cálculo."""
    CLARO = "Claro"
    OSCURO = "Oscuro"
    AUTOMATICO = "Automático"


# fondo, texto, botón, campo
COLORES_TEMA: Dict[Tema, Dict[str, str]] = {
    Tema.CLARO: {'fondo': '#FFFFFF', 'texto': '#1E64C8', 'boton': '#1E64C8', 'campo': '#E5E5EA'},
    Tema.OSCURO: {'fondo': '#000000', 'texto': '#FFFFFF', 'boton': '#8E8E93', 'campo': '#AEAEB2'},
}


def css_tema(tema: Tema) -> str:
    """
    Bloque <style> para el tema elegido.
    El tema automático deja los colores de Streamlit (cadena vacía).
    """
    colores = COLORES_TEMA.get(tema)
    if colores is None:
        return ""
    return f"""
    <style>
    .stApp {{
        background-color: {colores['fondo']};
    }}
    .stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label {{
        color: {colores['texto']};
    }}
    div[data-testid="stTextInput"] input, div[data-testid="stDateInput"] input {{
        background-color: {colores['campo']};
    }}
    div[data-testid="stButton"] button {{
        background-color: {colores['boton']};
        color: #FFFFFF;
    }}
    </style>
    """


# ==============================================================================
# --- 3. PRESENTACIÓN DEL RESULTADO ---
# ==============================================================================

def debe_mostrar_resultado(resultado: Optional[ResultadoCTS]) -> bool:
    """Solo se muestran resultados con CTS mayor a cero."""
    return resultado is not None and resultado.cts_total > 0

def formatear_soles(monto: float) -> str:
    return f"{SIMBOLO_MONEDA} {monto:,.2f}"

def resumen_resultado(resultado: ResultadoCTS) -> pd.DataFrame:
    """Tabla Concepto / Valor con el resultado, lista para st.table."""
    filas = [
        ("Periodo Final del Cómputo", resultado.fin_periodo.strftime('%d/%m/%Y')),
        ("Meses Computables", str(resultado.meses_computables)),
        ("Días Computables", str(resultado.dias_computables)),
        ("Total Remuneración Computable", formatear_soles(resultado.remuneracion_computable)),
        ("Total CTS a Depositar", formatear_soles(resultado.cts_total)),
    ]
    return pd.DataFrame(filas, columns=['Concepto', 'Valor'])
