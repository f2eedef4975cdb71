"""Describes the Resipi domain. Centres around the `RecipeSession`.

A session owns a list of ingredients and a controller that asks a language
model for a Malay recipe using only those ingredients.

- The ingredient list is the only thing with invariants: trimmed, non-empty,
  unique ignoring case, in the order the user typed them.
- The recipe itself is produced by the machine and is never modified, so the
  controller only tracks whether a request is running and what came back.
- The language model sits behind an api. Anything with an async
  `generate_text(prompt)` will do, which keeps it easy to fake.
"""
