"""One sub-package per county; each holds some of ``owner_processor``,
``layout_extractor``, ``structure_extractor`` and ``utility_extractor``."""
