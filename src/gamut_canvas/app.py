from __future__ import annotations

import logging
from math import isnan
from typing import Any, Mapping

from coloraide import Color
from flask import Flask, jsonify, request

from .config import DEFAULT_GAMUT, DEFAULT_MODEL, DEFAULT_SPACE
from .mapping import CanvasMapper
from .pixels import to_display_buffer
from .search import closest_color, constrain_position
from .spaces import channel_range, resolve_space

log = logging.getLogger(__name__)

DEFAULT_SIZE = 200.0
DEFAULT_COLOR = "#808080"


def parse_color(s: str | None) -> Color:
    """Any CSS color string ColorAide understands."""
    try:
        return Color((s or DEFAULT_COLOR).strip())
    except ValueError:
        raise ValueError(f"invalid color: {s!r}") from None


def parse_channels(s: str | None) -> tuple[str, str] | None:
    if not s:
        return None
    parts = tuple(p.strip().lower() for p in s.split(","))
    if len(parts) != 2:
        raise ValueError("channels must be two names, e.g. 'c,h'")
    return parts[0], parts[1]


def parse_number(args: Mapping[str, str], name: str, default: float | None = None) -> float:
    raw = args.get(name)
    if raw is None:
        if default is None:
            raise ValueError(f"missing '{name}'")
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"'{name}' must be a number") from None


def mapper_from_args(args: Mapping[str, str]) -> CanvasMapper:
    return CanvasMapper(
        size=parse_number(args, "size", DEFAULT_SIZE),
        base_color=parse_color(args.get("color")),
        space=args.get("space", DEFAULT_SPACE),
        model=args.get("model", DEFAULT_MODEL),
        channels=parse_channels(args.get("channels")),
        gamut=args.get("gamut", DEFAULT_GAMUT),
    )


def color_payload(color: Color) -> dict[str, Any]:
    return {
        "color": color.to_string(),
        "space": color.space(),
        "coords": [None if isnan(v) else v for v in color.coords()],
    }


# ----------------------------- Flask app ----------------------------------


def create_app() -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    def respond(build):
        try:
            return jsonify(build(request.args))
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        except Exception as exc:
            log.exception("Canvas request failed")
            return jsonify({"error": str(exc)}), 500

    @app.route("/config")
    def config():
        def build(args):
            cfg = resolve_space(args.get("space", DEFAULT_SPACE), args.get("model", DEFAULT_MODEL))
            return {
                "id": cfg.id,
                "channels": list(cfg.channels),
                "default_channels": list(cfg.default_channels),
                "third_channel": cfg.third_channel,
                "ranges": {ch: list(channel_range(ch, cfg.id)) for ch in cfg.channels},
            }

        return respond(build)

    @app.route("/pixel")
    def pixel():
        def build(args):
            mapper = mapper_from_args(args)
            color = mapper.pixel_to_color(parse_number(args, "x"), parse_number(args, "y"))
            payload = color_payload(color)
            payload["rgba"] = list(to_display_buffer(color, args.get("display", "srgb")))
            return payload

        return respond(build)

    @app.route("/position")
    def position():
        def build(args):
            mapper = mapper_from_args(args)
            pos = mapper.color_to_pixel(mapper.base_color)
            return {"x": pos.x, "y": pos.y}

        return respond(build)

    @app.route("/constrain")
    def constrain():
        def build(args):
            mapper = mapper_from_args(args)
            pos = constrain_position(mapper, parse_number(args, "x"), parse_number(args, "y"))
            return {"x": pos.x, "y": pos.y}

        return respond(build)

    @app.route("/closest")
    def closest():
        def build(args):
            mapper = mapper_from_args(args)
            color = closest_color(mapper, parse_number(args, "x"), parse_number(args, "y"))
            return color_payload(color)

        return respond(build)

    return app


__all__ = ["create_app", "parse_color", "parse_channels", "parse_number"]


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
