"""A very tiny CLI.

Invoke using e.g. ``python -m octasphere version`` or
``python -m octasphere generate --subdivisions 3``.
"""

import sys
import argparse

import octasphere


def main(argv=None):
    # Get argv so we can massage it
    if argv is None:
        argv = sys.argv[1:]

    # Defaults and aliases
    if not argv:
        argv = ["help"]
    if argv == ["--version"]:
        argv = ["version"]

    parser = argparse.ArgumentParser(
        prog="octasphere",
        description="Generate a subdivided octahedron and export it as OBJ.",
    )
    parser.add_argument(
        "command",
        action="store",
        help="The command to run: 'help', 'version' or 'generate'",
    )
    parser.add_argument(
        "--radius", type=float, default=1.0, help="The radius of the sphere"
    )
    parser.add_argument(
        "--subdivisions",
        type=int,
        default=0,
        help=f"The number of subdivision rounds (max {octasphere.MAX_SUBDIVISIONS})",
    )
    parser.add_argument(
        "--name",
        default=octasphere.DEFAULT_MESH_NAME,
        help="The mesh name, also used for the file name",
    )
    parser.add_argument(
        "--output-dir", default=".", help="The directory to write the OBJ file to"
    )

    args = parser.parse_args(argv)
    command = args.command.lower()

    if command == "help":
        parser.print_help()
    elif command == "version":
        print("octasphere v" + octasphere.__version__)
    elif command == "generate":
        try:
            config = octasphere.OctasphereConfig(
                radius=args.radius, subdivisions=args.subdivisions, name=args.name
            )
        except (TypeError, ValueError) as err:
            parser.error(str(err))
        mesh = octasphere.generate(config)
        path = octasphere.export_obj(mesh, args.output_dir)
        print(
            f"Wrote {mesh.vertex_count} vertices and "
            f"{mesh.triangle_count} triangles to {path}"
        )
    else:
        print(f"Invalid command '{command}'")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
