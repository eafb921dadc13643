"""Export meshes to the Wavefront OBJ format.

The output is plain text: a comment header, the vertices (``v`` lines), a
group (``g`` line) and the faces (``f`` lines). Face indices in OBJ files are
1-based, so each index is the mesh index plus one. The winding order of the
triangles is preserved.
"""

from datetime import datetime
from pathlib import Path

import jinja2

from .._version import __version__
from . import logger


jinja_env = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    autoescape=False,
)

HEADER_TEMPLATE = """# {{ exporter_name }}
# File Created: {{ created.day }}.{{ created.month }}.{{ created.year }} {{ created.hour }}:{{ created.minute }}:{{ created.second }}

#
# {{ name }}
#"""


class MeshExporter:
    """Serialize meshes to Wavefront OBJ text.

    Parameters
    ----------
    exporter_name : str | None
        The identity written on the first line of the header. Defaults to the
        name and version of this package.
    precision : int
        The number of decimals for the vertex coordinates. Default 6.

    """

    def __init__(self, exporter_name=None, precision=6):
        if exporter_name is None:
            exporter_name = f"Octasphere Wavefront OBJ Exporter v{__version__}"
        precision = int(precision)
        if precision < 0:
            raise ValueError("Precision must be a non-negative int.")
        self._exporter_name = str(exporter_name)
        self._precision = precision
        self._header_template = jinja_env.from_string(HEADER_TEMPLATE)

    @property
    def exporter_name(self):
        return self._exporter_name

    @property
    def precision(self):
        return self._precision

    def _render_header(self, name, created):
        try:
            return self._header_template.render(
                exporter_name=self._exporter_name, created=created, name=name
            )
        except jinja2.UndefinedError as err:
            raise ValueError(f"Cannot render OBJ header: {err.args[0]}") from None

    def to_text(self, mesh, name=None, created=None):
        """Get the OBJ text for the given mesh.

        Parameters
        ----------
        mesh : Mesh
            The mesh to serialize.
        name : str | None
            The name for the header and the group. Defaults to ``mesh.name``.
        created : datetime | None
            The creation time in the header. Defaults to now.

        Returns
        -------
        text : str
            The complete file contents.

        """
        name = name or mesh.name
        created = created or datetime.now()
        p = self._precision

        parts = [self._render_header(name, created), "\n"]
        parts.extend(
            f"\nv  {x:.{p}f} {y:.{p}f} {z:.{p}f}" for x, y, z in mesh.positions.tolist()
        )
        parts.append(f"\n# {mesh.vertex_count} vertices\n")
        parts.append(f"\ng {name}")
        parts.extend(
            f"\nf {i1} {i2} {i3}" for i1, i2, i3 in (mesh.indices + 1).tolist()
        )
        parts.append(f"\n# {mesh.triangle_count} faces\n\n")
        return "".join(parts)

    def export(self, mesh, directory, name=None, created=None):
        """Write the mesh to ``<directory>/<name>.obj``.

        An existing file with that name is overwritten. Errors when writing
        the file (e.g. a missing directory or no permission) are raised as-is.

        Returns
        -------
        path : Path
            The path of the written file.

        """
        name = name or mesh.name
        text = self.to_text(mesh, name=name, created=created)
        path = Path(directory) / f"{name}.obj"
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        logger.info(f"Exported {mesh!r} to {path}")
        return path


def export_obj(mesh, directory=".", name=None):
    """Export the mesh to ``<directory>/<name>.obj`` with the default exporter.

    Returns the path of the written file.
    """
    return MeshExporter().export(mesh, directory, name=name)
