"""Tests for pathkit/types.py predicates and pathkit/log.py."""
import io
import logging
from pathkit.types import (
    Line, Circle, Arc, Bezier,
    is_point, is_path, is_path_line, is_path_circle, is_path_arc, is_path_bezier,
)
from pathkit.log import setup_logging


def test_is_point():
    assert is_point((0, 1.5))
    assert is_point([1, 2])
    assert not is_point((1, 2, 3))
    assert not is_point((float("nan"), 0))
    assert not is_point(("a", 0))
    assert not is_point(None)


def test_predicates_are_exact_variants(line, circle, arc, quad):
    assert is_path_line(line) and not is_path_line(quad)
    assert is_path_circle(circle) and not is_path_circle(arc)
    assert is_path_arc(arc) and not is_path_arc(circle)
    assert is_path_bezier(quad) and not is_path_bezier(line)


def test_is_path(all_paths):
    assert all(is_path(p) for p in all_paths)
    assert not is_path((0, 0))


def test_layer_is_keyword_only():
    arc = Arc((0, 0), 1, 0, 45, layer="x")
    assert arc.layer == "x"
    assert Bezier((0, 0), (1, 1), [(0, 1)]).layer is None


def test_setup_logging_single_handler(tmp_path):
    log_file = tmp_path / "pathkit.log"
    setup_logging(logging.DEBUG, str(log_file))
    logger = setup_logging(logging.DEBUG, str(log_file))
    assert logger.name == "pathkit"
    assert len(logger.handlers) == 2
    logging.getLogger("pathkit.breaking").debug("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
    logger.handlers.clear()


def test_setup_logging_to_stream():
    buf = io.StringIO()
    logger = setup_logging(logging.DEBUG, stream=buf)
    logging.getLogger("pathkit.transform").debug("skipped")
    assert "DEBUG pathkit.transform: skipped" in buf.getvalue()
    assert len(logger.handlers) == 1
    logger.handlers.clear()
