# -*- coding: utf-8 -*-
"""
Calculadora de CTS Perú (App Streamlit)

Interfaz de usuario. Toda la lógica de cálculo está en motor.py y la
lectura/presentación de datos en formulario.py.
Ejecutar con: streamlit run main.py
"""

# --- 0. IMPORTACIONES NECESARIAS ---
import logging
import streamlit as st
from datetime import datetime

from motor import (
    ASIGNACION_FAMILIAR_CTS,
    ErrorAritmeticaFechas,
    ResultadoCTS,
    calcular_cts,
    calcular_fin_periodo,
    calcular_gratificacion_ordinaria,
    inicio_periodo_cts,
)
from formulario import (
    Tema,
    construir_entradas,
    css_tema,
    debe_mostrar_resultado,
    formatear_soles,
    parsear_monto,
    resumen_resultado,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


# ==============================================================================
# --- SECCIÓN DE HELPERS DE UI ---
# ==============================================================================

def mostrar_resultado_streamlit(resultado: ResultadoCTS):
    """Muestra el resultado de la CTS en la UI de Streamlit."""
    st.header("Resultados")
    st.metric("Total CTS a Depositar", formatear_soles(resultado.cts_total))

    col1, col2, col3 = st.columns(3)
    col1.metric("Meses Computables", resultado.meses_computables)
    col2.metric("Días Computables", resultado.dias_computables)
    col3.metric("Total Remuneración Computable", formatear_soles(resultado.remuneracion_computable))

    with st.expander("Ver Desglose del Cálculo", expanded=True):
        st.table(resumen_resultado(resultado))
        st.caption(f"Periodo computado: {resultado.fecha_inicio_computo.strftime('%d/%m/%Y')} "
                   f"al {resultado.fin_periodo.strftime('%d/%m/%Y')} ({resultado.dias_totales} días, método 360)")
        st.markdown(f"**Valor Mensual (RC / 12):** `{formatear_soles(resultado.valor_mensual)}`")
        st.markdown(f"**Valor Diario (Valor Mensual / 30):** `{formatear_soles(resultado.valor_diario)}`")

    with st.expander("Ver Diccionario de Resultados (JSON)"):
        st.json(resultado.como_dict())


# ==============================================================================
# === INICIO DE LA APLICACIÓN STREAMLIT ===
# ==============================================================================

# --- Configuración de la Página ---
st.set_page_config(
    layout="centered",
    page_title="Calculadora de CTS",
    page_icon="🇵🇪"
)

if 'resultado_cts' not in st.session_state:
    st.session_state['resultado_cts'] = None
    st.session_state['entradas_cts'] = None

# --- Tema ---
with st.sidebar:
    nombre_tema = st.radio(
        "Selecciona un Tema",
        [tema.value for tema in Tema],
        index=2,
        key="tema_app"
    )
tema_actual = Tema(nombre_tema)
css = css_tema(tema_actual)
if css:
    st.markdown(css, unsafe_allow_html=True)

st.title("Calculadora de CTS")
st.info("Cálculo referencial del depósito semestral de CTS (D.S. N° 001-97-TR).")

# --- Datos del Trabajador ---
today = datetime.now().date()

col1, col2 = st.columns(2)
with col1:
    in_fecha_ingreso = st.date_input("Fecha de Ingreso", value=today, help="Fecha de inicio del vínculo laboral.")
with col2:
    in_inicio_periodo = st.date_input(
        "Periodo Inicial del Cómputo",
        value=inicio_periodo_cts(today),
        help="Primer día del semestre: 1 de Noviembre o 1 de Mayo."
    )

try:
    fin_periodo = calcular_fin_periodo(in_inicio_periodo)
    st.markdown(f"**Periodo Final del Cómputo:** `{fin_periodo.strftime('%d/%m/%Y')}`")
except ErrorAritmeticaFechas as e:
    st.error(f"Fecha fuera de rango: {e}")

in_sueldo = st.text_input("Sueldo Bruto Mensual", value="", placeholder="0.00")
in_asignacion = st.checkbox(
    f"Asignación Familiar ({formatear_soles(ASIGNACION_FAMILIAR_CTS)})",
    value=False,
    help="Base Legal: Ley N° 25129."
)
in_gratificacion = st.text_input("Gratificación (S/. Julio/Diciembre)", value="", placeholder="0.00")

st.markdown(
    f"**Gratificación Ordinaria:** "
    f"`{formatear_soles(calcular_gratificacion_ordinaria(parsear_monto(in_gratificacion)))}`"
)

entradas = construir_entradas(
    fecha_ingreso=in_fecha_ingreso,
    inicio_periodo=in_inicio_periodo,
    sueldo_texto=in_sueldo,
    asignacion_familiar=in_asignacion,
    gratificacion_texto=in_gratificacion
)

if st.button("Calcular CTS", type="primary"):
    st.session_state['entradas_cts'] = entradas
    try:
        with st.spinner("Calculando CTS..."):
            st.session_state['resultado_cts'] = calcular_cts(entradas)
    except ErrorAritmeticaFechas as e:
        logger.warning("Cálculo de CTS rechazado: %s", e)
        st.session_state['resultado_cts'] = None
        st.error(f"No se pudo calcular la CTS: {e}")

# Un resultado calculado con otros datos del formulario no se muestra
resultado = None
if st.session_state['entradas_cts'] == entradas:
    resultado = st.session_state['resultado_cts']

if debe_mostrar_resultado(resultado):
    mostrar_resultado_streamlit(resultado)
elif resultado is not None:
    st.warning("El cálculo no genera CTS a depositar (monto S/. 0.00).")

st.divider()
st.caption("Calculadora de CTS - Herramienta referencial.")
