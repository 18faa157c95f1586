import os
import os.path

from oledframe.frame import Frame

PIL_ERROR_MESSAGE = (
    "Could not import Pillow. This dependency of oledframe is not "
    "installed by default. You need it to save frames as PNG images. Install it "
    "with `pip install 'oledframe[image]'`"
)


class FrameImageWriter:
    """Write frames to PNG files

    Every panel pixel becomes a `scale` x `scale` square of the image.
    """

    def __init__(self, outdir: str, scale: int = 1) -> None:
        if scale < 1:
            raise ValueError("Scale must be at least 1, got %d" % scale)
        self.outdir = outdir
        self.scale = scale
        if not os.path.exists(self.outdir):
            os.makedirs(self.outdir)

    def export_frame(self, frame: Frame, name: str) -> str:
        """Save a Frame to disk and return the file name used"""
        try:
            from PIL import Image  # type: ignore[import]
        except ImportError:
            raise ImportError(PIL_ERROR_MESSAGE)

        img = Image.new("1", frame.dimensions)
        img.putdata([255 if p else 0 for row in frame.rows for p in row])
        if self.scale != 1:
            img = img.resize(
                (frame.width * self.scale, frame.height * self.scale),
                Image.NEAREST,
            )

        filename, path = self._create_unique_image_name(name, ".png")
        with open(path, "wb") as fp:
            img.save(fp, "PNG")
        return filename

    def _create_unique_image_name(self, name: str, ext: str) -> tuple[str, str]:
        filename = name + ext
        path = os.path.join(self.outdir, filename)
        img_index = 0
        while os.path.exists(path):
            filename = "%s.%d%s" % (name, img_index, ext)
            path = os.path.join(self.outdir, filename)
            img_index += 1
        return filename, path
