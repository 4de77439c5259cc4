from datetime import date, timedelta
import dataclasses

import pytest

import motor
from motor import (
    ASIGNACION_FAMILIAR_CTS,
    EntradasCTS,
    ErrorAritmeticaFechas,
    calcular_asignacion_familiar,
    calcular_cts,
    calcular_fin_periodo,
    calcular_gratificacion_ordinaria,
    contar_dias_computables,
    inicio_periodo_cts,
)


# --- Fin del periodo ---

@pytest.mark.parametrize("inicio, esperado", [
    (date(2024, 1, 15), date(2024, 6, 30)),
    (date(2024, 2, 29), date(2024, 7, 31)),
    (date(2024, 1, 1), date(2024, 6, 30)),
    (date(2023, 11, 1), date(2024, 4, 30)),
    (date(2024, 5, 1), date(2024, 10, 31)),
    (date(2023, 9, 30), date(2024, 2, 29)),
    (date(2024, 8, 31), date(2025, 1, 31)),
])
def test_fin_periodo_es_ultimo_dia_del_sexto_mes(inicio, esperado):
    assert calcular_fin_periodo(inicio) == esperado


def test_fin_periodo_cae_siempre_en_fin_de_mes():
    inicio = date(2023, 1, 1)
    while inicio < date(2025, 1, 1):
        fin = calcular_fin_periodo(inicio)
        assert (fin + timedelta(days=1)).day == 1
        assert (fin.year * 12 + fin.month) - (inicio.year * 12 + inicio.month) == 5
        inicio += timedelta(days=7)


def test_fin_periodo_fuera_de_rango():
    with pytest.raises(ErrorAritmeticaFechas):
        calcular_fin_periodo(date(9999, 8, 1))


# --- Conteo de días (360/30) ---

@pytest.mark.parametrize("inicio, fin, esperado", [
    (date(2024, 1, 1), date(2024, 6, 30), 180),
    (date(2024, 2, 16), date(2024, 6, 30), 135),
    (date(2023, 12, 16), date(2024, 4, 30), 135),
    (date(2024, 6, 29), date(2024, 6, 30), 2),
    (date(2022, 1, 1), date(2024, 3, 10), 2 * 360 + 2 * 30 + 10),
])
def test_contar_dias_computables(inicio, fin, esperado):
    assert contar_dias_computables(inicio, fin) == esperado


def test_contar_dias_mismo_dia_es_cero():
    assert contar_dias_computables(date(2024, 6, 30), date(2024, 6, 30)) == 0


@pytest.mark.parametrize("inicio", [
    date(2024, 7, 1),
    date(2024, 12, 31),
    date(2030, 1, 1),
])
def test_contar_dias_nunca_es_negativo(inicio):
    assert contar_dias_computables(inicio, date(2024, 6, 30)) == 0


def test_contar_dias_fuera_de_rango():
    with pytest.raises(ErrorAritmeticaFechas):
        contar_dias_computables(date(9999, 12, 1), date(9999, 12, 31))


# --- Semestre de CTS ---

@pytest.mark.parametrize("fecha, esperado", [
    (date(2024, 3, 15), date(2023, 11, 1)),
    (date(2024, 4, 30), date(2023, 11, 1)),
    (date(2024, 5, 1), date(2024, 5, 1)),
    (date(2024, 10, 31), date(2024, 5, 1)),
    (date(2024, 11, 20), date(2024, 11, 1)),
    (date(2024, 12, 31), date(2024, 11, 1)),
])
def test_inicio_periodo_cts(fecha, esperado):
    assert inicio_periodo_cts(fecha) == esperado


# --- Remuneración computable ---

def test_asignacion_familiar():
    assert calcular_asignacion_familiar(True) == ASIGNACION_FAMILIAR_CTS == 102.50
    assert calcular_asignacion_familiar(False) == 0.0


def test_gratificacion_ordinaria_es_un_sexto():
    assert calcular_gratificacion_ordinaria(600.0) == 100.0
    assert calcular_gratificacion_ordinaria(0.0) == 0.0


def test_entradas_exponen_valores_derivados():
    entradas = EntradasCTS(date(2020, 1, 1), date(2024, 1, 1), 3000.0, True, 600.0)
    assert entradas.gratificacion_ordinaria == 100.0
    assert entradas.fin_periodo == date(2024, 6, 30)


def test_entradas_son_inmutables():
    entradas = EntradasCTS(date(2020, 1, 1), date(2024, 1, 1), 3000.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entradas.sueldo_bruto = 1.0


# --- Cálculo completo ---

def test_semestre_completo_con_asignacion_y_gratificacion():
    entradas = EntradasCTS(
        fecha_ingreso=date(2020, 1, 1),
        inicio_periodo=date(2024, 1, 1),
        sueldo_bruto=3000.00,
        asignacion_familiar=True,
        gratificacion=600.00,
    )
    resultado = calcular_cts(entradas)

    assert resultado.fin_periodo == date(2024, 6, 30)
    assert resultado.fecha_inicio_computo == date(2024, 1, 1)
    assert resultado.asignacion == 102.50
    assert resultado.gratificacion_ordinaria == 100.00
    assert resultado.remuneracion_computable == pytest.approx(3202.50)
    assert resultado.meses_computables == 6
    assert resultado.dias_computables == 0
    assert resultado.valor_mensual == pytest.approx(266.875)
    assert resultado.cts_total == pytest.approx(1601.25)


def test_ingreso_dentro_del_periodo():
    entradas = EntradasCTS(
        fecha_ingreso=date(2024, 2, 16),
        inicio_periodo=date(2024, 1, 1),
        sueldo_bruto=3000.0,
    )
    resultado = calcular_cts(entradas)

    assert resultado.fecha_inicio_computo == date(2024, 2, 16)
    assert resultado.dias_totales == 135
    assert resultado.meses_computables == 4
    assert resultado.dias_computables == 15
    assert resultado.valor_diario == pytest.approx(250.0 / 30)
    assert resultado.cts_total == pytest.approx(4 * 250.0 + 15 * 250.0 / 30)


def test_ingreso_45_dias_despues_del_inicio():
    inicio = date(2023, 11, 1)
    resultado = calcular_cts(EntradasCTS(inicio + timedelta(days=45), inicio, 1500.0))

    assert resultado.dias_totales == 135
    assert resultado.meses_computables == 4
    assert resultado.dias_computables == 15


def test_montos_en_cero():
    resultado = calcular_cts(EntradasCTS(date(2020, 1, 1), date(2024, 1, 1)))

    assert resultado.remuneracion_computable == 0
    assert resultado.cts_total == 0
    assert resultado.meses_computables == 6


def test_ingreso_en_ultimo_dia_del_periodo():
    resultado = calcular_cts(EntradasCTS(date(2024, 6, 30), date(2024, 1, 1), 3000.0, True, 600.0))

    assert resultado.dias_totales == 0
    assert resultado.meses_computables == 0
    assert resultado.dias_computables == 0
    assert resultado.cts_total == 0


def test_ingreso_posterior_al_periodo():
    resultado = calcular_cts(EntradasCTS(date(2024, 9, 1), date(2024, 1, 1), 3000.0))

    assert resultado.dias_totales == 0
    assert resultado.cts_total == 0


def test_meses_se_limitan_a_seis_sin_ajustar_dias(monkeypatch):
    monkeypatch.setattr(motor, 'contar_dias_computables', lambda inicio, fin: 200)
    resultado = calcular_cts(EntradasCTS(date(2020, 1, 1), date(2024, 1, 1), 1200.0))

    assert resultado.meses_computables == 6
    assert resultado.dias_computables == 20
    assert resultado.cts_total == pytest.approx(6 * 100.0 + 20 * 100.0 / 30)


def test_rangos_de_meses_y_dias():
    for desfase_inicio in range(0, 400, 11):
        inicio = date(2023, 1, 1) + timedelta(days=desfase_inicio)
        for desfase_ingreso in range(-60, 240, 17):
            ingreso = inicio + timedelta(days=desfase_ingreso)
            resultado = calcular_cts(EntradasCTS(ingreso, inicio, 2000.0, True, 2000.0))
            assert 0 <= resultado.meses_computables <= 6
            assert 0 <= resultado.dias_computables <= 29
            assert resultado.cts_total >= 0


def test_calculo_es_determinista():
    entradas = EntradasCTS(date(2024, 2, 16), date(2024, 1, 1), 4321.09, True, 987.65)
    assert calcular_cts(entradas) == calcular_cts(entradas)


def test_fecha_fuera_de_rango_no_devuelve_resultado():
    with pytest.raises(ErrorAritmeticaFechas):
        calcular_cts(EntradasCTS(date(2020, 1, 1), date(9999, 9, 1), 3000.0))


def test_como_dict():
    resultado = calcular_cts(EntradasCTS(date(2020, 1, 1), date(2024, 1, 1), 3000.0, True, 600.0))
    datos = resultado.como_dict()

    assert datos['fin_periodo'] == '2024-06-30'
    assert datos['fecha_inicio_computo'] == '2024-01-01'
    assert datos['meses_computables'] == 6
    assert datos['cts_total'] == pytest.approx(1601.25)
