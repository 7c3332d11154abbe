"""File-based JSON storage for the Asterix API.

Data layout:
  data/
    characters.json   [{id, name, age, profession, villageId}]
    villages.json     [{id, name}]

The character side holds the relation: a village's inhabitants are the
characters whose villageId names it. Ids are uuid4 strings.
"""

# Re-export all public symbols so `from backend import storage` keeps working.

from .core import (  # noqa: F401
    data_dir,
    init_storage,
)

from .characters import (  # noqa: F401
    get_character,
    get_characters,
    save_characters,
)

from .villages import (  # noqa: F401
    get_village,
    get_villages,
    save_villages,
)
