import argparse
import math

import numpy as np
from PIL import Image

from camera import Camera
from color import Color
from light import PointLight
from material import Material
from matrix import Matrix4, scaling, view_transform
from pattern import PATTERN_KINDS
from scene_settings import SceneSettings
from surfaces.cube import Cube
from surfaces.infinite_plane import InfinitePlane
from surfaces.sphere import Sphere
from tuples import point, vector
from world import World


SHAPE_KINDS = {
    "sph": Sphere,
    "pln": InfinitePlane,
    "box": Cube,
}


def _shape_transform(params):
    """translate . rotate_x . rotate_y . rotate_z . scale, rotations in degrees."""
    tx, ty, tz, rx, ry, rz, sx, sy, sz = params
    return (Matrix4.identity()
            .translate(tx, ty, tz)
            .rotate_x(math.radians(rx))
            .rotate_y(math.radians(ry))
            .rotate_z(math.radians(rz))
            .scale(sx, sy, sz))


def parse_scene_file(file_path, width, height):
    """Parse the scene file and return camera, settings, and scene objects."""
    objects = []
    camera = None
    scene_settings = SceneSettings()

    with open(file_path, 'r') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            obj_type = parts[0]

            if obj_type == "pat":
                kind = parts[1]
                if kind not in PATTERN_KINDS:
                    raise ValueError("Unknown pattern kind: {}".format(kind))
                params = [float(p) for p in parts[2:]]
                materials = [o for o in objects if isinstance(o, Material)]
                if not materials:
                    raise ValueError("Pattern defined before any material")
                pattern = PATTERN_KINDS[kind](Color(*params[:3]), Color(*params[3:6]))
                pattern.set_transform(scaling(*params[6:9]))
                materials[-1].pattern = pattern
                continue

            params = [float(p) for p in parts[1:]]

            if obj_type == "cam":
                camera = Camera(width, height, math.radians(params[9]))
                camera.set_transform(view_transform(
                    point(*params[:3]), point(*params[3:6]), vector(*params[6:9])))
            elif obj_type == "set":
                scene_settings = SceneSettings(max_recursions=int(params[0]))
            elif obj_type == "mtl":
                material = Material(
                    color=Color(*params[:3]),
                    ambient=params[3],
                    diffuse=params[4],
                    specular=params[5],
                    shininess=params[6],
                    reflective=params[7],
                    transparency=params[8],
                    refractive_index=params[9],
                )
                objects.append(material)
            elif obj_type in SHAPE_KINDS:
                shape = SHAPE_KINDS[obj_type]()
                shape.set_transform(_shape_transform(params[:9]))
                shape.material_index = int(params[9])
                objects.append(shape)
            elif obj_type == "lgt":
                light = PointLight(point(*params[:3]), Color(*params[3:6]))
                objects.append(light)
            else:
                raise ValueError("Unknown object type: {}".format(obj_type))

    if camera is None:
        raise ValueError("Scene file {} has no camera".format(file_path))

    return camera, scene_settings, objects


def separate_objects(objects):
    """Separate parsed objects into materials, surfaces, and lights."""
    materials = []
    surfaces = []
    lights = []

    for obj in objects:
        if isinstance(obj, Material):
            materials.append(obj)
        elif isinstance(obj, PointLight):
            lights.append(obj)
        elif isinstance(obj, (Sphere, InfinitePlane, Cube)):
            surfaces.append(obj)

    return materials, surfaces, lights


def build_world(materials, surfaces, lights, scene_settings):
    """Attach materials (1-indexed) to surfaces and wrap everything in a World."""
    if len(lights) != 1:
        raise ValueError("Scene must define exactly one light, found {}".format(len(lights)))

    for surface in surfaces:
        index = surface.material_index
        if not 1 <= index <= len(materials):
            raise ValueError("Surface {} references undefined material {}".format(surface, index))
        surface.material = materials[index - 1]

    return World(lights[0], surfaces, scene_settings)


def _render_row_chunk(args):
    """Worker entry point: render rows [y_start, y_end)."""
    y_start, y_end, camera, world, depth = args
    return y_start, y_end, camera.render_rows(world, y_start, y_end, depth)


def render_parallel(camera, world, num_workers=None, depth=None):
    """
    Render the scene using multiprocessing (parallel row-based rendering).

    Every worker gets its own copy of the camera and world and writes only
    its own rows, so the result matches the sequential render.
    """
    import multiprocessing as mp
    import time

    if num_workers is None:
        num_workers = mp.cpu_count()

    start_time = time.time()
    width, height = camera.hsize, camera.vsize
    print(f"Parallel rendering {width}x{height} with {num_workers} workers...")

    # Divide rows into chunks
    rows_per_chunk = max(1, height // (num_workers * 4))  # 4 chunks per worker for load balancing
    chunks = []
    for y_start in range(0, height, rows_per_chunk):
        y_end = min(y_start + rows_per_chunk, height)
        chunks.append((y_start, y_end, camera, world, depth))

    print(f"Divided into {len(chunks)} chunks of ~{rows_per_chunk} rows each")

    pool_start = time.time()
    with mp.Pool(num_workers) as pool:
        results = pool.map(_render_row_chunk, chunks)

    print(f"All chunks completed in {time.time() - pool_start:.2f}s")

    # Assemble final image
    image = np.zeros((height, width, 3), dtype=np.float64)
    for y_start, y_end, rows in results:
        image[y_start:y_end] = rows

    total_time = time.time() - start_time
    print(f"Parallel rendering complete in {total_time:.1f}s")

    return image


def save_image(image_array, output_path):
    """Save the rendered image to a file."""
    # Clamp values to [0, 1] then scale to [0, 255]
    image_array = np.clip(image_array, 0, 1)
    image_array = (image_array * 255).round().astype(np.uint8)

    image = Image.fromarray(image_array)
    image.save(output_path)
    print(f"Image saved to {output_path}")


def main(argv=None):
    import multiprocessing as mp
    import time

    parser = argparse.ArgumentParser(description='Python Ray Tracer')
    parser.add_argument('scene_file', type=str, help='Path to the scene file')
    parser.add_argument('output_image', type=str, help='Name of the output image file')
    parser.add_argument('--width', type=int, default=500, help='Image width')
    parser.add_argument('--height', type=int, default=500, help='Image height')
    parser.add_argument('--depth', type=int, default=None,
                        help='Recursion depth (default: scene setting)')
    parser.add_argument('--sequential', action='store_true',
                        help='Render in a single process')
    parser.add_argument('--workers', type=int, default=None,
                        help='Number of worker processes (default: CPU count)')
    args = parser.parse_args(argv)

    camera, scene_settings, objects = parse_scene_file(args.scene_file, args.width, args.height)
    materials, surfaces, lights = separate_objects(objects)
    world = build_world(materials, surfaces, lights, scene_settings)

    print(f"Scene loaded: {len(materials)} materials, {len(surfaces)} surfaces, {len(lights)} lights")
    print(f"Rendering {args.width}x{args.height} image, max depth {scene_settings.max_recursions if args.depth is None else args.depth}...")

    if args.sequential:
        start_time = time.time()
        image_array = camera.render(world, args.depth)
        print(f"Sequential rendering complete in {time.time() - start_time:.1f}s")
    else:
        num_workers = args.workers if args.workers else mp.cpu_count()
        image_array = render_parallel(camera, world, num_workers, args.depth)

    save_image(image_array, args.output_image)


if __name__ == '__main__':
    main()
