# main.py
import argparse
import math
import sys
import traceback
from core.vector import Vector3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from materials.lambertian import Lambertian
from materials.presets import MetalPresets, DielectricPresets, ColorPresets
from renderer.config import QUALITY_LEVELS, SHADING_MODES, TONE_MAPPING_MODES, RenderSettings
from renderer.image_output import save_image
from renderer.raytracer import Renderer

def create_sphere_world() -> HittableList:
    """A small sphere resting on a large ground sphere."""
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.5, 0.5, 0.5))))
    world.add(Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Vector3(0.5, 0.5, 0.5))))
    return world

def create_material_world() -> HittableList:
    """Diffuse, metal and hollow glass spheres side by side."""
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.BLUE)))
    world.add(Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.GREEN)))
    world.add(Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.gold()))
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, DielectricPresets.glass()))
    # Negative radius flips the normals, making the glass sphere a thin shell
    world.add(Sphere(Vector3(-1, 0, -1), -0.45, DielectricPresets.glass()))
    return world

SCENES = {
    "spheres": create_sphere_world,
    "materials": create_material_world,
}

def create_camera(aspect_ratio: float, args: argparse.Namespace = None) -> Camera:
    """Camera from the command-line view options; no options gives the fixed viewport."""
    if args is None:
        return Camera(aspect_ratio=aspect_ratio)
    return Camera(
        position=Vector3(*args.position),
        yaw=math.radians(args.yaw),
        pitch=math.radians(args.pitch),
        fov=math.radians(args.fov),
        aspect_ratio=aspect_ratio,
        aperture=args.aperture,
        focus_dist=args.focus_dist
    )

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tinytrace", description="Render a sphere scene to an image.")
    parser.add_argument("--width", type=int, default=200)
    parser.add_argument("--height", type=int, default=100)
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="preview")
    parser.add_argument("--samples", type=int, help="samples per pixel (overrides --quality)")
    parser.add_argument("--depth", type=int, help="maximum bounces (overrides --quality)")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--shading", choices=SHADING_MODES, default="material")
    parser.add_argument("--scene", choices=sorted(SCENES), default="spheres")
    parser.add_argument("--tone-mapping", choices=TONE_MAPPING_MODES, default="gamma")
    parser.add_argument("--gamma", type=float)
    parser.add_argument("--position", type=float, nargs=3, default=(0.0, 0.0, 0.0), metavar=("X", "Y", "Z"))
    parser.add_argument("--yaw", type=float, default=0.0, help="degrees, turning right from -z")
    parser.add_argument("--pitch", type=float, default=0.0, help="degrees, tilting up")
    parser.add_argument("--fov", type=float, default=90.0, help="vertical field of view in degrees")
    parser.add_argument("--aperture", type=float, default=0.0, help="lens diameter, 0 for a pinhole")
    parser.add_argument("--focus-dist", type=float, default=1.0)
    parser.add_argument("--output", "-o", default="-", help='image path, "-" for PPM on stdout')
    return parser.parse_args(argv)

def default_gamma(args: argparse.Namespace):
    # Normal shading shows normals linearly unless a gamma is asked for
    if args.gamma is None and args.shading == "normal":
        return 1.0
    return args.gamma

def main(argv=None) -> int:
    args = parse_args(argv)
    # Keep stdout clean when the image is written there
    status = sys.stderr if args.output == "-" else sys.stdout

    try:
        settings = RenderSettings.from_quality(
            args.quality,
            width=args.width,
            height=args.height,
            samples=args.samples,
            max_depth=args.depth,
            seed=args.seed,
            shading=args.shading,
            tone_mapping=args.tone_mapping,
            gamma=default_gamma(args),
        )

        print("\n=== Creating World ===", file=status)
        world = SCENES[args.scene]()
        print(f"Scene '{args.scene}' with {len(world)} objects", file=status)

        print("\n=== Rendering ===", file=status)
        print(f"Render resolution: {settings.width}x{settings.height}", file=status)
        print(f"Samples per pixel: {settings.samples}", file=status)
        print(f"Max bounces: {settings.max_depth}", file=status)
        print(f"Shading: {settings.shading}", file=status)
        camera = create_camera(settings.aspect_ratio, args)
        print(f"Camera position: {camera.position}", file=status)
        print(f"Camera forward: {camera.forward}", file=status)

        renderer = Renderer(settings)
        image = renderer.render(camera, world)
        save_image(args.output, renderer.to_rgb8(image))

        if args.output != "-":
            print(f"Image written to {args.output}", file=status)
    except Exception as e:
        print(f"Error during execution: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
