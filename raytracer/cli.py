import argparse
import logging

from raytracer.app import App
from raytracer.common import Settings
from raytracer.display import save_frame, show_frame


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--width", type=int, default=320, help="Image width")
    parser.add_argument("--height", type=int, default=180, help="Image height")
    parser.add_argument("--bounces", type=int, default=0, help="Number of times a ray can bounce")
    parser.add_argument("--fov", type=float, default=70.0, help="Vertical field of view in degrees")
    parser.add_argument("--output", help="Save the image to this file instead of showing it")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = Settings(
        width=args.width,
        height=args.height,
        bounces=args.bounces,
        fov=args.fov,
    )

    app = App(settings)
    app.run()

    if args.output:
        save_frame(app.frame, args.output)
    else:
        show_frame(app.frame)
