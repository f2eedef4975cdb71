from typing import Iterable


INGREDIENT_DELIMITER = ", "


MALAY_RECIPE_PROMPT = """
You are an expert chef specializing in authentic Malay cuisine. Your task is to create a delicious Malay food recipe using ONLY the following ingredients: {ingredients}.

Your response must be in Markdown format and structured as follows:

### **[Catchy Malay Recipe Name]**

**Description:**
A brief, enticing description of the dish.

**Ingredients:**
- [Ingredient 1]
- [Ingredient 2]
- ... (Only use the ingredients provided in the list above)

**Instructions:**
1. [Step 1]
2. [Step 2]
3. ...

**Chef's Tip:**
(Optional: Add a helpful tip related to the preparation or serving of the dish).

If it's impossible to create a traditional Malay dish with the given ingredients, be creative and invent a modern fusion dish with a strong Malay flavor profile. Do not use any ingredients not mentioned in the provided list. Do not invent quantities if they cannot be inferred; just list the ingredients.
  """


class RecipePrompt:
    def __init__(
        self,
        ingredients: Iterable[str],
        template: str | None = None,
    ) -> None:
        self.ingredients = tuple(ingredients)
        self.template = MALAY_RECIPE_PROMPT if template is None else template

    def __str__(self) -> str:
        return self.template.format(
            ingredients=INGREDIENT_DELIMITER.join(self.ingredients)
        )
