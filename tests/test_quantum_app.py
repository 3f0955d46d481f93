import io

import pytest

from gbemu import quantum_app
from gbemu.quantum import QuantumState
from gbemu.quantum_app import QuantumTetrisApp


@pytest.fixture
def app():
    a = QuantumTetrisApp(io.StringIO(""), io.StringIO())
    a.frame_delay = 0.0
    a.render_interval = 0.0
    return a


def test_quit_command_stops(app):
    app.handle_command("q\n")
    assert app.running is False


def test_upper_case_quit(app):
    app.handle_command("Q\n")
    assert app.running is False


def test_observe_command(app):
    app.handle_command("o\n")
    assert app.game.stats.observer_interactions == 1


def test_superpose_command(app):
    app.handle_command("s\n")
    assert app.game.stats.superposition_events == len(app.game.current_quantum_pieces)
    assert all(
        p.quantum_state is QuantumState.SUPERPOSITION for p in app.game.current_quantum_pieces
    )


def test_tunnel_command_moves_to_score_position(app):
    app.handle_command("t\n")
    assert app.game.stats.tunneling_events == 3
    for piece in app.game.current_quantum_pieces:
        assert all((c.x, c.y) == (0.0, 0.0) for c in piece.spacetime_coords)


def test_entangle_command(app):
    before = app.game.stats.entanglement_count
    app.handle_command("e\n")
    assert app.game.stats.entanglement_count == before + 1


def test_unknown_and_empty_commands_ignored(app):
    app.handle_command("x\n")
    app.handle_command("")
    assert app.running is True
    assert app.game.stats.observer_interactions == 0


def test_render_draws_board_and_pieces(app):
    app.render()
    text = app.output.getvalue()
    assert "┌" + "─" * 12 + "┐" in text
    assert "│" + "█" * 12 + "│" in text
    # the superposed pair piece sits at x=3 and x=7 on the top row
    assert "\x1b[4;6H◐" in text
    assert "\x1b[4;10H◐" in text


def test_run_until_quit_shows_results():
    out = io.StringIO()
    a = QuantumTetrisApp(io.StringIO("\ne\nq\n"), out)
    a.frame_delay = 0.0
    a.render_interval = 0.0
    a.run()
    text = out.getvalue()
    assert a.running is False
    assert "Quantum game over!" in text
    assert "Entanglements: 2" in text


def test_run_stops_at_end_of_input():
    out = io.StringIO()
    a = QuantumTetrisApp(io.StringIO("\no\n"), out)
    a.frame_delay = 0.0
    a.run()
    assert a.running is False
    assert "Observations: 1" in out.getvalue()


def test_main_returns_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\nq\n"))
    assert quantum_app.main() == 0
    assert "Quantum game over!" in capsys.readouterr().out