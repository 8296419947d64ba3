"""File-based JSON storage split into one global and many per-user snapshots.

Data layout:
  data/
    global.json          {"users": [...], "categories": [...]}
    users/
      <key>.json         {"username", "entries", "story", "materials"}

<key> is the slugified username plus a short digest of the exact name, so
usernames differing only in case never share a file.

Every operation is a read-modify-write of whole snapshots under one
re-entrant process lock. Category renames and deletions cascade into the
entries of every user snapshot. Failures are raised as the typed errors in
``errors``; filesystem errors (OSError) propagate unchanged.
"""

# Re-export all public symbols so `from promptshelf import storage` keeps working.

from .core import (  # noqa: F401
    DEFAULT_CATEGORIES,
    GLOBAL_SCOPE,
    data_dir,
    init_storage,
    load_snapshot,
    save_snapshot,
    slugify,
    storage_lock,
    user_key,
    user_scopes,
    users_dir,
)

from .errors import (  # noqa: F401
    DuplicateCategory,
    DuplicateUser,
    IndexOutOfRange,
    InvalidArgument,
    InvalidCredentials,
    LastCategoryError,
    MissingField,
    NotFound,
    OwnerMismatch,
    StorageError,
)

from .users import (  # noqa: F401
    authenticate,
    get_user,
    list_users,
    register_user,
)

from .entries import (  # noqa: F401
    ALL_CATEGORIES,
    create_entry,
    delete_entry,
    get_entry,
    list_entries,
    search_entries,
    set_entry_done,
    update_entry,
)

from .categories import (  # noqa: F401
    FALLBACK_CATEGORY,
    add_category,
    list_categories,
    remove_category,
    rename_category,
)

from .story import (  # noqa: F401
    add_scene,
    clone_scene_from_entry,
    delete_scene,
    get_story,
    set_scene_done,
    story_timeline,
    update_scene,
    update_story_meta,
)

from .materials import (  # noqa: F401
    MATERIAL_TYPES,
    create_material,
    delete_material,
    list_materials,
    search_materials,
)
