import os
import sys

from sectorpatterns.generator import *
from sectorpatterns.logger import *
from sectorpatterns.file_handler import RawPatternFile


def render_images(written):
    from sectorpatterns.pattern_display import PatternDisplay

    handler = RawPatternFile()
    for info in written:
        image_path = os.path.splitext(info.path)[0] + ".png"
        PatternDisplay(handler.read(info.path)).plot_track(title=info.file_name, save_path=image_path)


def main(save_images=False, log_path=None):
    logger = Logger()
    logger.display_progress = False

    written = generate(logger=logger)
    for info in written:
        print(f"Generated {info.file_name}: {info.size} bytes")

    passed = verify(logger=logger)
    if passed:
        print("All pattern files verified.")
    else:
        print("Pattern file verification failed.")

    # images and the log file are opt-in, a plain run leaves only the four .raw files
    if save_images:
        render_images(written)
    if log_path is not None:
        logger.save(log_path)

    return 0 if passed else 1

if __name__ == "__main__":
    sys.exit(main())
