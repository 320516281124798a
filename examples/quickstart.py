"""
atlaspack Quick Start Example

This example packs a handful of generated sprites, first with the low-level
AtlasBuilder and then through the full build pipeline.
"""

from pathlib import Path

from PIL import Image

from atlaspack import AtlasBuilder, BuildConfig, Size, build
from atlaspack.schema import ImageDefinition

out = Path("output")
out.mkdir(exist_ok=True)

# Layout only: identifiers and sizes in, rectangles out
builder = AtlasBuilder(64, 64)
if not builder.build([("hero", Size(32, 16)), ("coin", Size(8, 8)), ("tree", Size(16, 32))]):
    raise SystemExit(f"Only {builder.placed_count} of 3 sprites fit")
atlas = builder.finish()
for name, rect in atlas.textures.items():
    print(f"{name}: {rect}")
print(f"Atlas size: {atlas.size.width}x{atlas.size.height}")

# Full build: images on disk -> atlas.png + atlas.json
colors = {"red.png": (255, 0, 0, 255), "green.png": (0, 255, 0, 255), "blue.png": (0, 0, 255, 255)}
for i, (name, color) in enumerate(colors.items()):
    Image.new("RGBA", (8 * (i + 1), 8), color).save(out / name)

config = BuildConfig(
    width=64,
    height=64,
    images=[ImageDefinition(path=name) for name in colors],
    base_dir=out,
    output_image=out / "atlas.png",
    output_map=out / "atlas.json",
)
build(config)
print("✅ Saved output/atlas.png and output/atlas.json")
