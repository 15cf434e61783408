# main.py
import argparse
import sys
from renderer.raytracer import DEFAULT_MAX_DEPTH, Renderer
from renderer.image_output import save_image, show_preview
from scenes.demo import DEMO_SCENES
from scenes.parser import DEFAULT_OUTPUT, SceneFileError, load_scene

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Whitted-style Python Ray Tracer")
    parser.add_argument("scene_file", nargs="?", default=None,
                        help="Path to a scene description file (default: built-in demo)")
    parser.add_argument("-o", "--output", default=None,
                        help="Output image path (default: from the scene file, or raytrace.ppm)")
    parser.add_argument("--demo", choices=sorted(DEMO_SCENES), default="two_spheres",
                        help="Built-in scene used when no scene file is given")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Recursion depth bound (default: from the scene file, or "
                             f"{DEFAULT_MAX_DEPTH})")
    parser.add_argument("--workers", type=int, default=1,
                        help="Number of worker processes (default: 1, sequential)")
    parser.add_argument("--preview", action="store_true",
                        help="Show the rendered image in a window")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    verbose = not args.quiet

    if args.scene_file is not None:
        try:
            description = load_scene(args.scene_file)
        except (FileNotFoundError, SceneFileError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        scene = description.scene
        max_depth = description.max_depth
        output = description.output
        if verbose:
            print(f"Scene loaded from {args.scene_file}")
    else:
        scene = DEMO_SCENES[args.demo]()
        max_depth = DEFAULT_MAX_DEPTH
        output = DEFAULT_OUTPUT
        if verbose:
            print(f"Using built-in scene: {args.demo}")

    if args.max_depth is not None:
        max_depth = args.max_depth
    if args.output is not None:
        output = args.output

    try:
        renderer = Renderer(max_depth=max_depth, workers=args.workers, verbose=verbose)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    pixels = renderer.render(scene)

    try:
        save_image(pixels, output)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if verbose:
        print(f"Image saved to {output}")

    if args.preview:
        show_preview(pixels)
    return 0

if __name__ == "__main__":
    sys.exit(main())
