"""Create demo data for development/testing."""

import shutil

from promptshelf import storage

DEMO_USER = "demo"
DEMO_PASSWORD = "demo"

# 1x1 transparent PNG
DEMO_IMAGE = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)

DEMO_ENTRIES = [
    {
        "category": "MidJourney",
        "prompt_text": "A lighthouse on a cliff at dusk, volumetric fog, cinematic lighting",
        "tags": "#landscape, #moody",
    },
    {
        "category": "Sora",
        "prompt_text": "Slow dolly shot through a rainy neon street, reflections on asphalt",
        "tags": "#city, #night",
    },
    {
        "category": "Leonardo AI",
        "prompt_text": "Portrait of an old fisherman, weathered skin, soft window light",
        "tags": "#portrait",
    },
]

DEMO_MATERIALS = [
    {"title": "Prompting guide", "type": "link", "url": "https://docs.midjourney.com/", "tags": "#docs"},
    {"title": "Camera moves explained", "type": "video", "url": "https://www.youtube.com/", "tags": "#camera"},
]


def create_demo_data() -> None:
    """Wipe existing data and create a demo user with entries, a story, and materials."""
    data_dir = storage.data_dir()
    if data_dir.exists():
        shutil.rmtree(data_dir)
    storage.init_storage(data_dir)

    storage.register_user(DEMO_USER, DEMO_PASSWORD)

    entries = [
        storage.create_entry(DEMO_USER, e["category"], e["prompt_text"], DEMO_IMAGE, tags=e["tags"])
        for e in DEMO_ENTRIES
    ]
    storage.set_entry_done(entries[0].id, True)

    storage.update_story_meta(
        DEMO_USER,
        scenario="A lonely keeper watches the storm roll in, then walks down to the harbour town.",
    )
    storage.clone_scene_from_entry(DEMO_USER, entries[0])
    storage.add_scene(DEMO_USER, {
        "image": DEMO_IMAGE,
        "prompt_text": "Keeper walks the stairs down to the town",
        "video_title": "Descent",
        "duration": 6,
        "animation_prompt": "handheld follow shot, rain starting",
    })
    storage.clone_scene_from_entry(DEMO_USER, entries[1])
    storage.update_scene(DEMO_USER, 2, {"duration": 4})

    for m in DEMO_MATERIALS:
        storage.create_material(DEMO_USER, m["title"], m["type"], m["url"], m["tags"])

    print(
        f"Created demo user '{DEMO_USER}' (password '{DEMO_PASSWORD}') with "
        f"{len(DEMO_ENTRIES)} entries, 3 scenes and {len(DEMO_MATERIALS)} materials."
    )
