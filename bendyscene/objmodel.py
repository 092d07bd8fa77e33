"""Loading Wavefront OBJ models and their MTL material libraries."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

__all__ = [
    "Face",
    "Material",
    "MaterialSwitch",
    "Model",
    "load_model",
    "load_mtl",
    "parse_mtl",
    "parse_obj",
]

logger = logging.getLogger(__name__)

_CENTER_DISTANCE_FACTOR = 15


@dataclass
class Material:
    """A named surface material with RGBA lighting colours."""

    name: str
    ambient: list[float] = field(default_factory=lambda: [0.2, 0.2, 0.2, 1.0])
    diffuse: list[float] = field(default_factory=lambda: [0.8, 0.8, 0.8, 1.0])
    specular: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 1.0])
    texture: int = 0


@dataclass(frozen=True)
class Face:
    """A polygon given by zero-based vertex, texture and normal indices."""

    vertices: tuple[int, ...]
    texcoords: tuple[int, ...] | None = None
    normal: int = -1


@dataclass(frozen=True)
class MaterialSwitch:
    """Marks that following faces use the material at this index."""

    material: int


@dataclass
class Model:
    """Geometry of a loaded model and the offset that centres it in view."""

    vertices: list[tuple[float, float, float]] = field(default_factory=list)
    texcoords: list[tuple[float, float]] = field(default_factory=list)
    normals: list[tuple[float, float, float]] = field(default_factory=list)
    faces: list[Face | MaterialSwitch] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)
    pos_x: float = 0.0
    pos_y: float = 0.0
    pos_z: float = 0.0


_COLOUR_KEYS = {"Ka": "ambient", "Kd": "diffuse", "Ks": "specular"}


def _leading_floats(tokens: list[str], limit: int) -> list[float]:
    values = []
    for token in tokens[:limit]:
        try:
            values.append(float(token))
        except ValueError:
            break
    return values


def parse_mtl(text: str) -> list[Material]:
    """Parse the text of a material library into materials, in file order."""
    materials: list[Material] = []
    for line in text.splitlines():
        if line.startswith("ne"):
            tokens = line.split()
            if tokens[0] == "newmtl" and len(tokens) > 1:
                materials.append(Material(tokens[1]))
        elif line.startswith("K") and materials:
            tokens = line.split()
            attribute = _COLOUR_KEYS.get(tokens[0])
            if attribute is None:
                continue
            colour = getattr(materials[-1], attribute)
            values = _leading_floats(tokens[1:], 3)
            colour[:len(values)] = values
    return materials


def load_mtl(path: str | PathLike[str]) -> list[Material]:
    """Read and parse a material library file."""
    return parse_mtl(Path(path).read_text(encoding="utf-8"))


def _floats(line: str, count: int) -> tuple[float, ...]:
    tokens = line.split()[1:count + 1]
    if len(tokens) < count:
        raise ValueError(f"Malformed line: {line!r}")
    try:
        return tuple(float(token) for token in tokens)
    except ValueError as exc:
        raise ValueError(f"Malformed line: {line!r}") from exc


def _parse_face(line: str) -> Face | None:
    body = line[:-1]
    edge = body.count(" ")
    slashes = body.count("/")
    if slashes == 0:
        kind = "v"
    elif slashes == edge:
        kind = "vt"
    elif slashes == edge * 2:
        kind = "vn" if "//" in body else "vtn"
    else:
        return None

    count = 3 if edge == 3 else 4
    tokens = line.split()[1:count + 1]
    if len(tokens) < count:
        raise ValueError(f"Malformed face: {line!r}")
    parts = [token.split("/") for token in tokens]
    try:
        vertices = tuple(int(p[0]) - 1 for p in parts)
        texcoords = None
        if kind in ("vt", "vtn"):
            texcoords = tuple(int(p[1]) - 1 for p in parts)
        normal = -1
        if kind in ("vn", "vtn"):
            # Only one normal is kept per face: the last vertex's.
            normal = int(parts[-1][2]) - 1
    except (ValueError, IndexError) as exc:
        raise ValueError(f"Malformed face: {line!r}") from exc
    return Face(vertices, texcoords, normal)


def _centre(model: Model) -> None:
    if not model.vertices:
        model.pos_x = model.pos_y = model.pos_z = math.nan
        return
    count = len(model.vertices)
    xs, ys, zs = zip(*model.vertices)
    model.pos_x = -sum(xs) / count
    model.pos_y = -sum(ys) / count
    mean_abs = [sum(abs(c) for c in axis) / count for axis in (xs, ys, zs)]
    model.pos_z = -math.sqrt(sum(m * m for m in mean_abs)) * _CENTER_DISTANCE_FACTOR


def parse_obj(text: str, base_dir: str | PathLike[str] | None = None) -> Model:
    """Parse OBJ text; material libraries are looked up in ``base_dir``."""
    base = Path(base_dir) if base_dir is not None else Path()
    model = Model()
    lookup: dict[str, int] = {}

    for line in text.splitlines():
        if line.startswith("v "):
            model.vertices.append(_floats(line, 3))
        elif line.startswith("vt"):
            model.texcoords.append(_floats(line, 2))
        elif line.startswith("vn"):
            model.normals.append(_floats(line, 3))
        elif line.startswith("f"):
            face = _parse_face(line)
            if face is not None:
                model.faces.append(face)
        elif line.startswith("mt"):
            tokens = line.split()
            if tokens[0] != "mtllib" or len(tokens) < 2:
                continue
            library = base / tokens[1]
            try:
                loaded = load_mtl(library)
            except OSError:
                logger.warning("Cannot load material %s", library)
                continue
            offset = len(model.materials)
            model.materials.extend(loaded)
            lookup.update({m.name: offset + i for i, m in enumerate(loaded)})
        elif line.startswith("us"):
            tokens = line.split()
            if tokens[0] == "usemtl" and len(tokens) > 1 and tokens[1] in lookup:
                model.faces.append(MaterialSwitch(lookup[tokens[1]]))

    _centre(model)
    return model


def load_model(path: str | PathLike[str]) -> Model:
    """Read an OBJ file, resolving material libraries next to it."""
    file = Path(path)
    return parse_obj(file.read_text(encoding="utf-8"), file.parent)