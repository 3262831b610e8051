"""Blog list backend: users share blog links, like them and comment on them."""
