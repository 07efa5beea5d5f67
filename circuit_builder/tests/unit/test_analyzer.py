"""Tests for analyze_circuit(): the full pipeline from snapshot to result."""

import copy

import pytest
from analysis.analyzer import analyze_circuit, analyze_model
from analysis.results import SHORT_CIRCUIT_SENTINEL, AnalysisResult, ComponentReading, assemble_result
from analysis.topology import CircuitStatus
from models.circuit import CircuitModel
from models.component import ComponentData, InvalidComponentError


class TestScenarios:
    def test_single_resistor_loop(self, single_loop_circuit):
        result = analyze_circuit(*single_loop_circuit)
        assert result.status == CircuitStatus.CLOSED
        assert result.valid
        assert not result.short_circuit
        assert result.total_current == pytest.approx(0.09)
        assert result.total_power == pytest.approx(0.81)

    def test_series_resistors(self, series_circuit):
        result = analyze_circuit(*series_circuit)
        assert result.total_resistance == pytest.approx(300.0)
        assert result.total_current == pytest.approx(0.03)

    def test_parallel_resistors(self, parallel_circuit):
        result = analyze_circuit(*parallel_circuit)
        assert result.total_resistance == pytest.approx(50.0)
        assert result.total_current == pytest.approx(0.18)
        assert result.get("R1").current == pytest.approx(0.09)
        assert result.get("R2").current == pytest.approx(0.09)

    def test_short_circuit(self, short_circuit):
        result = analyze_circuit(*short_circuit)
        assert result.short_circuit
        assert result.valid
        assert not result.current_flowing
        assert result.total_current == SHORT_CIRCUIT_SENTINEL
        assert result.total_power == SHORT_CIRCUIT_SENTINEL
        assert result.get("B1").current == SHORT_CIRCUIT_SENTINEL

    def test_open_switch(self, open_switch_circuit):
        result = analyze_circuit(*open_switch_circuit)
        assert result.status == CircuitStatus.OPEN
        assert result.valid
        assert all(reading.current == 0.0 for reading in result.component_data.values())
        assert result.get("B1").voltage == 9.0
        assert result.total_current == 0.0
        assert result.total_resistance == 0.0
        assert any("S1" in w for w in result.warnings)

    def test_disconnected_resistor(self, disconnected_circuit):
        result = analyze_circuit(*disconnected_circuit)
        assert result.status == CircuitStatus.DISCONNECTED
        assert not result.valid
        assert result.component_data == {}
        assert result.total_current == 0.0
        assert any("R9" in w for w in result.warnings)

    def test_no_battery(self):
        result = analyze_circuit([ComponentData("R1", "Resistor", (0, 0))], [])
        assert result.status == CircuitStatus.NO_SOURCE
        assert not result.valid
        assert result.component_data == {}

    def test_empty_circuit(self):
        result = analyze_circuit([], [])
        assert not result.valid

    def test_zero_volt_battery_without_load(self, short_circuit):
        components, wires = short_circuit
        result = analyze_circuit([components[0].with_value(0.0)], wires)
        assert result.status == CircuitStatus.CLOSED
        assert result.total_current == 0.0
        assert result.get("B1").current == 0.0


class TestCircuitLaws:
    @pytest.mark.parametrize("r1,r2,voltage", [(100.0, 200.0, 9.0), (47.0, 330.0, 12.0), (1.0, 1.0, 1.5)])
    def test_series_law(self, series_circuit, r1, r2, voltage):
        components, wires = series_circuit
        b1, c1, c2 = components
        result = analyze_circuit([b1.with_value(voltage), c1.with_value(r1), c2.with_value(r2)], wires)
        assert result.total_resistance == pytest.approx(r1 + r2)
        assert result.total_current == pytest.approx(voltage / (r1 + r2))

    @pytest.mark.parametrize("r1,r2,voltage", [(100.0, 100.0, 9.0), (200.0, 300.0, 12.0), (10.0, 1000.0, 5.0)])
    def test_parallel_law(self, parallel_circuit, r1, r2, voltage):
        components, wires = parallel_circuit
        b1, c1, c2 = components
        result = analyze_circuit([b1.with_value(voltage), c1.with_value(r1), c2.with_value(r2)], wires)
        expected = (r1 * r2) / (r1 + r2)
        assert result.total_resistance == pytest.approx(expected)
        assert result.total_current == pytest.approx(voltage / expected)
        i1 = result.get("R1").current
        i2 = result.get("R2").current
        assert i1 * r1 == pytest.approx(voltage)
        assert i2 * r2 == pytest.approx(voltage)

    def test_parallel_bank_in_series(self, series_parallel_circuit):
        result = analyze_circuit(*series_parallel_circuit)
        assert result.status == CircuitStatus.CLOSED
        assert result.total_resistance == pytest.approx(150.0)
        assert result.total_current == pytest.approx(0.06)
        assert result.get("R1").current == pytest.approx(0.03)
        assert result.get("R2").current == pytest.approx(0.03)
        assert result.get("R3").current == pytest.approx(0.06)
        assert result.get("R1").voltage == pytest.approx(3.0)
        assert result.get("R3").voltage == pytest.approx(6.0)
        assert result.get("R1").voltage + result.get("R3").voltage == pytest.approx(9.0)
        assert result.dissipated_power == pytest.approx(result.total_power)

    @pytest.mark.parametrize(
        "fixture_name",
        [
            "single_loop_circuit",
            "series_circuit",
            "parallel_circuit",
            "series_parallel_circuit",
            "closed_switch_circuit",
        ],
    )
    def test_power_conservation(self, request, fixture_name):
        result = analyze_circuit(*request.getfixturevalue(fixture_name))
        assert result.current_flowing
        assert result.dissipated_power == pytest.approx(result.total_power)
        battery_power = sum(
            result.get(cid).power for cid in result.component_data if cid.startswith("B")
        )
        assert battery_power == pytest.approx(result.total_power)

    def test_lightbulb_acts_as_resistor(self, single_loop_circuit):
        components, wires = single_loop_circuit
        bulb = ComponentData("L1", "Lightbulb", (0, 4), "vertical", resistance=100.0)
        result = analyze_circuit([components[0], bulb], wires)
        assert result.total_current == pytest.approx(0.09)
        assert result.get("L1").power == pytest.approx(0.81)

    def test_wire_component_is_zero_resistance(self, single_loop_circuit):
        components, wires = single_loop_circuit
        # Replace the top wire run with a Wire part spanning (0,0)-(0,2)
        wire_part = ComponentData("W1", "Wire", (0, 0))
        wires = [w for w in wires if w.start not in ((0, 0), (0, 1)) or w.end not in ((0, 1), (0, 2))]
        result = analyze_circuit(components + [wire_part], wires)
        assert result.total_resistance == pytest.approx(100.0)
        assert result.get("W1").voltage == 0.0
        assert result.get("W1").current == pytest.approx(0.09)


class TestPurity:
    def test_deterministic(self, parallel_circuit):
        first = analyze_circuit(*parallel_circuit)
        second = analyze_circuit(*parallel_circuit)
        assert first.to_dict() == second.to_dict()

    def test_inputs_not_mutated(self, closed_switch_circuit):
        components, wires = closed_switch_circuit
        before = (copy.deepcopy(components), copy.deepcopy(wires))
        analyze_circuit(components, wires)
        assert (components, wires) == before

    def test_component_order_does_not_change_totals(self, series_circuit):
        components, wires = series_circuit
        forward = analyze_circuit(components, wires)
        backward = analyze_circuit(list(reversed(components)), list(reversed(wires)))
        assert backward.total_resistance == pytest.approx(forward.total_resistance)
        assert backward.total_current == pytest.approx(forward.total_current)

    def test_analyze_model(self, series_circuit):
        components, wires = series_circuit
        model = CircuitModel()
        for comp in components:
            model.add_component(comp)
        for wire in wires:
            model.add_wire(wire)
        assert analyze_model(model).total_current == pytest.approx(0.03)


class TestContractViolations:
    def test_unknown_kind_raises(self, single_loop_circuit):
        components, wires = single_loop_circuit
        with pytest.raises(InvalidComponentError):
            analyze_circuit(components + [ComponentData("C1", "Capacitor", (5, 5))], wires)

    def test_negative_resistance_raises(self, single_loop_circuit):
        components, wires = single_loop_circuit
        bad = ComponentData("R1", "Resistor", (0, 4), "vertical", resistance=-10.0)
        with pytest.raises(InvalidComponentError):
            analyze_circuit([components[0], bad], wires)

    def test_infinite_voltage_raises(self, single_loop_circuit):
        components, wires = single_loop_circuit
        with pytest.raises(InvalidComponentError):
            analyze_circuit([components[0].with_value(float("inf")), components[1]], wires)


class TestAnalysisResult:
    def test_frozen(self, single_loop_circuit):
        result = analyze_circuit(*single_loop_circuit)
        with pytest.raises(AttributeError):
            result.total_current = 1.0
        with pytest.raises(TypeError):
            result.component_data["R1"] = ComponentReading()

    def test_get_missing(self, single_loop_circuit):
        assert analyze_circuit(*single_loop_circuit).get("R42") is None

    def test_to_dict(self, single_loop_circuit):
        data = analyze_circuit(*single_loop_circuit).to_dict()
        assert data["status"] == "closed"
        assert data["valid"] is True
        assert data["short_circuit"] is False
        assert data["components"]["R1"]["current"] == pytest.approx(0.09)

    def test_invalid_status_drops_readings(self):
        result = assemble_result(
            CircuitStatus.DISCONNECTED,
            readings={"R1": ComponentReading(1.0, 1.0, 1.0)},
            total_current=5.0,
        )
        assert isinstance(result, AnalysisResult)
        assert result.component_data == {}
        assert result.total_current == 0.0

    def test_status_detail(self, short_circuit):
        assert "Short circuit" in analyze_circuit(*short_circuit).status_detail
