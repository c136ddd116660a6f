from __future__ import annotations
from datetime import date
import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from pantry_chef.config import Config, init_logging
from pantry_chef.diet import DietProfileManager, STYLE_OPTIONS, apply_profile, resolve_style
from pantry_chef.formatter import format_meal_plan, format_recipe, format_shopping_list
from pantry_chef.generator import (
    ConfigurationError,
    InputValidationError,
    MalformedResponseError,
    ProviderError,
    generate_meal_plan,
    generate_recipe,
)
from pantry_chef.meal_calendar import MEAL_TYPES, MealCalendar
from pantry_chef.meal_plans import MealPlanBook
from pantry_chef.models import (
    PLAN_TYPES,
    GenerationConstraints,
    MealPlanRequest,
    RecipeRequest,
    normalize_ingredients,
)
from pantry_chef.recipe_book import RecipeBook
from pantry_chef.shopping import ShoppingListManager
from pantry_chef.spices import SpiceCatalog

console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(1)


def _load_config() -> Config:
    try:
        return Config()
    except ValidationError as e:
        _fail(f"Invalid configuration: {e}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool):
    """Pantry Chef: turn the ingredients you have into a recipe."""
    init_logging(_load_config(), verbose=verbose)


@cli.command()
@click.option("-i", "--ingredient", "ingredients", multiple=True, required=True,
              help="An ingredient you have (repeat for each one, at least 2).")
@click.option("-s", "--spice", "spices", multiple=True, help="A seasoning, oil or sauce you have.")
@click.option("--use-all", is_flag=True, help="Use every ingredient instead of picking the best subset.")
@click.option("--dietary", multiple=True, help="Dietary restriction, e.g. Vegan (repeatable).")
@click.option("--style", default=None,
              help=f"Preset ({', '.join(STYLE_OPTIONS)}) or free-text style.")
@click.option("--budget", is_flag=True, help="Favor inexpensive ingredients.")
@click.option("--no-profile", is_flag=True, help="Ignore the saved diet profile.")
@click.option("--save", is_flag=True, help="Save the recipe to your recipe book.")
def generate(ingredients, spices, use_all: bool, dietary, style: str | None,
             budget: bool, no_profile: bool, save: bool):
    """Generate a recipe from your ingredients."""
    config = _load_config()

    constraints = GenerationConstraints(
        dietary=list(dietary),
        budget_mode=budget,
        style=resolve_style(style),
        use_all_ingredients=use_all,
    )
    if not no_profile:
        profile = DietProfileManager(config.data_dir).load()
        if not profile.is_empty():
            constraints = apply_profile(constraints, profile)

    request = RecipeRequest(ingredients=list(ingredients), spices=list(spices), **constraints.model_dump())

    console.print("[dim]Generating recipe...[/dim]")
    try:
        draft = generate_recipe(request, config)
    except InputValidationError as e:
        _fail(str(e))
    except ConfigurationError:
        _fail("ANTHROPIC_API_KEY environment variable is not set.")
    except (ProviderError, MalformedResponseError) as e:
        err_console.print(f"[red]Recipe generation failed:[/red] {escape(str(e))}")
        err_console.print("Please try again.")
        raise SystemExit(1)

    console.print()
    console.print(format_recipe(draft), markup=False)

    if save:
        saved = RecipeBook(config.data_dir).save(
            draft,
            ingredients_input=normalize_ingredients(list(ingredients)),
            spices_used=list(spices),
        )
        console.print(f"\n[green]✓[/green] Saved as [bold]{saved.id}[/bold]")


@cli.group("spices")
def spices_group():
    """Manage the seasonings you keep on hand."""
    pass


@spices_group.command("list")
def spices_list():
    """Show your seasonings by category."""
    for category, spices in SpiceCatalog(_load_config().data_dir).by_category().items():
        console.print(f"[bold]{escape(category)}[/bold]: " + escape(", ".join(s.name for s in spices)))


@spices_group.command("add")
@click.argument("name")
@click.option("--category", default="Other", show_default=True)
def spices_add(name: str, category: str):
    """Add a seasoning to your catalogue."""
    SpiceCatalog(_load_config().data_dir).add(name, category)
    console.print(f"[green]✓[/green] Added seasoning: [bold]{escape(name)}[/bold]")


@spices_group.command("remove")
@click.argument("name")
def spices_remove(name: str):
    """Remove a seasoning from your catalogue."""
    SpiceCatalog(_load_config().data_dir).remove(name)
    console.print(f"[green]✓[/green] Removed seasoning: [bold]{escape(name)}[/bold]")


@cli.group("diet")
def diet():
    """Manage your diet profile (applied to every generation)."""
    pass


@diet.command("show")
def diet_show():
    """Show your diet profile."""
    profile = DietProfileManager(_load_config().data_dir).load()
    if profile.is_empty():
        console.print("No diet profile set. Use [bold]chef diet set[/bold] to create one.")
        return

    table = Table(title="Diet Profile", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Dietary", escape(", ".join(profile.dietary_restrictions)) or "—")
    table.add_row("Cuisines", escape(", ".join(profile.cuisine_preferences)) or "—")
    table.add_row("Proteins", escape(", ".join(profile.protein_preferences)) or "—")
    table.add_row("Dislikes", escape(", ".join(profile.disliked_ingredients)) or "—")
    table.add_row("Calories", str(profile.calorie_target) if profile.calorie_target else "—")
    table.add_row("Equipment", escape(", ".join(profile.kitchen_equipment)) or "—")
    table.add_row("Budget mode", "yes" if profile.budget_mode else "no")
    console.print(table)


@diet.command("set")
@click.option("--dietary", multiple=True, help="Dietary restriction (repeatable).")
@click.option("--cuisine", multiple=True, help="Preferred cuisine (repeatable).")
@click.option("--protein", multiple=True, help="Preferred protein (repeatable).")
@click.option("--dislike", multiple=True, help="Ingredient to avoid (repeatable).")
@click.option("--equipment", multiple=True, help="Kitchen equipment you own (repeatable).")
@click.option("--calories", type=int, default=None, help="Daily calorie target.")
@click.option("--budget/--no-budget", default=None, help="Favor inexpensive recipes.")
def diet_set(dietary, cuisine, protein, dislike, equipment, calories: int | None, budget: bool | None):
    """Update your diet profile. Only the options given are changed."""
    fields = {
        "dietary_restrictions": list(dietary),
        "cuisine_preferences": list(cuisine),
        "protein_preferences": list(protein),
        "disliked_ingredients": [d.strip().lower() for d in dislike if d.strip()],
        "kitchen_equipment": list(equipment),
    }
    updates = {k: v for k, v in fields.items() if v}
    if calories is not None:
        updates["calorie_target"] = calories
    if budget is not None:
        updates["budget_mode"] = budget
    if not updates:
        console.print("Nothing to update.")
        return

    try:
        DietProfileManager(_load_config().data_dir).update(**updates)
    except ValidationError as e:
        _fail(f"Invalid diet profile: {e}")
    console.print("[green]✓[/green] Diet profile saved.")


@diet.command("clear")
def diet_clear():
    """Remove your diet profile."""
    DietProfileManager(_load_config().data_dir).clear()
    console.print("[green]✓[/green] Diet profile cleared.")


@cli.group("recipe")
def recipe():
    """Manage saved recipes."""
    pass


@recipe.command("list")
@click.option("--favorites", is_flag=True, help="Only show favorites.")
@click.option("--family", is_flag=True, help="Only show family favorites.")
def recipe_list(favorites: bool, family: bool):
    """Show saved recipes, newest first."""
    recipes = RecipeBook(_load_config().data_dir).list(favorites_only=favorites, family_only=family)
    if not recipes:
        console.print("No saved recipes. Run [bold]chef generate --save[/bold] to add one.")
        return

    table = Table(title="Saved Recipes")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Time", justify="right")
    table.add_column("Difficulty")
    table.add_column("★")
    table.add_column("Family")
    for r in recipes:
        table.add_row(
            r.id,
            escape(r.title),
            f"{r.total_time_minutes} min",
            r.difficulty,
            "★" if r.is_favorite else "",
            "♥" if r.is_family_favorite else "",
        )
    console.print(table)


@recipe.command("show")
@click.argument("recipe_id")
def recipe_show(recipe_id: str):
    """Print a saved recipe."""
    try:
        saved = RecipeBook(_load_config().data_dir).get(recipe_id)
    except FileNotFoundError as e:
        _fail(str(e))
    console.print(format_recipe(saved), markup=False)


@recipe.command("delete")
@click.argument("recipe_id")
def recipe_delete(recipe_id: str):
    """Delete a saved recipe."""
    try:
        RecipeBook(_load_config().data_dir).delete(recipe_id)
    except FileNotFoundError as e:
        _fail(str(e))
    console.print(f"[green]✓[/green] Deleted recipe {escape(recipe_id)}")


@recipe.command("favorite")
@click.argument("recipe_id")
@click.option("--off", is_flag=True, help="Remove from favorites instead.")
def recipe_favorite(recipe_id: str, off: bool):
    """Mark a saved recipe as a favorite."""
    try:
        saved = RecipeBook(_load_config().data_dir).set_favorite(recipe_id, not off)
    except FileNotFoundError as e:
        _fail(str(e))
    label = "Removed from favorites" if off else "Favorited"
    console.print(f"[green]✓[/green] {label}: [bold]{escape(saved.title)}[/bold]")


@recipe.command("family")
@click.argument("recipe_id")
@click.option("--off", is_flag=True, help="Remove from family favorites instead.")
def recipe_family(recipe_id: str, off: bool):
    """Mark a saved recipe as a family favorite."""
    try:
        saved = RecipeBook(_load_config().data_dir).set_family_favorite(recipe_id, not off)
    except FileNotFoundError as e:
        _fail(str(e))
    label = "Removed from family favorites" if off else "Family favorite"
    console.print(f"[green]✓[/green] {label}: [bold]{escape(saved.title)}[/bold]")


@cli.group("calendar")
def calendar():
    """Schedule saved recipes on your meal calendar."""
    pass


@calendar.command("add")
@click.argument("recipe_id")
@click.argument("day", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option("--meal", "meal_type", type=click.Choice(MEAL_TYPES), default="dinner", show_default=True)
def calendar_add(recipe_id: str, day, meal_type: str):
    """Schedule a saved recipe on DAY (YYYY-MM-DD)."""
    config = _load_config()
    try:
        saved = RecipeBook(config.data_dir).get(recipe_id)
    except FileNotFoundError as e:
        _fail(str(e))
    meal = MealCalendar(config.data_dir).schedule(saved, day.date(), meal_type)
    console.print(f"[green]✓[/green] Scheduled {escape(saved.title)} for {meal_type} on {meal.day.isoformat()} ({meal.id})")


@calendar.command("remove")
@click.argument("meal_id")
def calendar_remove(meal_id: str):
    """Remove a scheduled meal."""
    try:
        MealCalendar(_load_config().data_dir).unschedule(meal_id)
    except KeyError as e:
        _fail(e.args[0])
    console.print(f"[green]✓[/green] Removed scheduled meal {escape(meal_id)}")


@calendar.command("week")
@click.argument("day", type=click.DateTime(formats=["%Y-%m-%d"]), required=False)
def calendar_week(day):
    """Show the meals scheduled for the week containing DAY (default: today)."""
    target = day.date() if day else date.today()
    meals = MealCalendar(_load_config().data_dir).week_of(target)
    if not meals:
        console.print("Nothing scheduled this week.")
        return

    table = Table(title="Meal Calendar")
    table.add_column("Day", style="cyan")
    table.add_column("Meal")
    table.add_column("Recipe")
    table.add_column("ID", style="dim")
    for m in meals:
        table.add_row(m.day.strftime("%a %Y-%m-%d"), m.meal_type, escape(m.recipe_title), m.id)
    console.print(table)


@cli.group("shop")
def shop():
    """Manage shopping lists."""
    pass


def _shopping(config: Config) -> ShoppingListManager:
    return ShoppingListManager(config.data_dir, categories=config.shopping_categories)


@shop.command("new")
@click.option("--name", default=None, help="List name (default: the plan title, or 'New Shopping List').")
@click.option("--from-recipe", "recipe_ids", multiple=True, help="Saved recipe ID to shop for (repeatable).")
@click.option("--from-plan", "plan_id", default=None, help="Saved meal plan ID to shop for.")
def shop_new(name: str | None, recipe_ids, plan_id: str | None):
    """Start a shopping list, optionally filled from saved recipes or a meal plan."""
    config = _load_config()
    if plan_id:
        try:
            meal_plan = MealPlanBook(config.data_dir).get(plan_id)
        except FileNotFoundError as e:
            _fail(str(e))
        shopping_list = _shopping(config).from_meal_plan(meal_plan, name=name)
    elif recipe_ids:
        book = RecipeBook(config.data_dir)
        try:
            recipes = [book.get(rid) for rid in recipe_ids]
        except FileNotFoundError as e:
            _fail(str(e))
        shopping_list = _shopping(config).from_recipes(recipes, name=name or "New Shopping List")
    else:
        shopping_list = _shopping(config).new(name=name or "New Shopping List")
    console.print(
        f"[green]✓[/green] Created [bold]{escape(shopping_list.name)}[/bold] "
        f"({shopping_list.id}, {len(shopping_list.items)} items)"
    )


@shop.command("list")
def shop_list():
    """Show all shopping lists."""
    lists = _shopping(_load_config()).list()
    if not lists:
        console.print("No shopping lists. Run [bold]chef shop new[/bold] to start one.")
        return

    table = Table(title="Shopping Lists")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Items", justify="right")
    table.add_column("Checked", justify="right")
    for s in lists:
        table.add_row(s.id, escape(s.name), str(len(s.items)), str(sum(1 for i in s.items if i.checked)))
    console.print(table)


@shop.command("show")
@click.argument("list_id")
def shop_show(list_id: str):
    """Print a shopping list grouped by category."""
    config = _load_config()
    try:
        shopping_list = _shopping(config).get(list_id)
    except FileNotFoundError as e:
        _fail(str(e))
    console.print(format_shopping_list(shopping_list, config.shopping_categories), markup=False)


@shop.command("add")
@click.argument("list_id")
@click.argument("item")
@click.argument("amount", default="")
@click.option("--category", default=None, help="Store category (guessed when omitted).")
def shop_add(list_id: str, item: str, amount: str, category: str | None):
    """Add an item to a shopping list."""
    try:
        entry = _shopping(_load_config()).add_item(list_id, item, amount, category)
    except FileNotFoundError as e:
        _fail(str(e))
    console.print(f"[green]✓[/green] Added {escape(entry.amount)} {escape(entry.item)} ({escape(entry.category)})")


@shop.command("check")
@click.argument("list_id")
@click.argument("index", type=int)
def shop_check(list_id: str, index: int):
    """Toggle the checked state of item INDEX (from 'shop show')."""
    try:
        entry = _shopping(_load_config()).toggle(list_id, index)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    state = "Checked" if entry.checked else "Unchecked"
    console.print(f"[green]✓[/green] {state}: {escape(entry.item)}")


@shop.command("remove")
@click.argument("list_id")
@click.argument("index", type=int)
def shop_remove(list_id: str, index: int):
    """Remove item INDEX (from 'shop show') from a shopping list."""
    try:
        entry = _shopping(_load_config()).remove_item(list_id, index)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    console.print(f"[green]✓[/green] Removed: {escape(entry.item)}")


@shop.command("clear")
@click.argument("list_id")
def shop_clear(list_id: str):
    """Remove all checked items from a shopping list."""
    try:
        removed = _shopping(_load_config()).clear_checked(list_id)
    except FileNotFoundError as e:
        _fail(str(e))
    console.print(f"[green]✓[/green] Cleared {removed} checked item(s).")


@shop.command("delete")
@click.argument("list_id")
def shop_delete(list_id: str):
    """Delete a shopping list."""
    try:
        _shopping(_load_config()).delete(list_id)
    except FileNotFoundError as e:
        _fail(str(e))
    console.print(f"[green]✓[/green] Deleted shopping list {escape(list_id)}")


@cli.group("plan")
def plan():
    """Generate and manage multi-day meal plans."""
    pass


@plan.command("new")
@click.option("--type", "plan_type", type=click.Choice(list(PLAN_TYPES)), default="dinner-plan", show_default=True)
@click.option("--people", type=click.IntRange(min=1), default=2, show_default=True)
@click.option("--days", type=click.IntRange(1, 14), default=5, show_default=True)
@click.option("--meals-per-day", type=click.IntRange(1, 4), default=1, show_default=True)
@click.option("-i", "--ingredient", "ingredients", multiple=True, help="An ingredient you already have (repeatable).")
@click.option("--dietary", multiple=True, help="Dietary restriction, e.g. Vegan (repeatable).")
@click.option("--budget", is_flag=True, help="Favor inexpensive ingredients.")
@click.option("--no-profile", is_flag=True, help="Ignore the saved diet profile.")
@click.option("--save", is_flag=True, help="Save the plan.")
def plan_new(plan_type: str, people: int, days: int, meals_per_day: int, ingredients, dietary,
             budget: bool, no_profile: bool, save: bool):
    """Generate a meal plan."""
    config = _load_config()

    constraints = GenerationConstraints(dietary=list(dietary), budget_mode=budget)
    if not no_profile:
        profile = DietProfileManager(config.data_dir).load()
        if not profile.is_empty():
            constraints = apply_profile(constraints, profile)

    request = MealPlanRequest(
        plan_type=plan_type,
        people=people,
        days=days,
        meals_per_day=meals_per_day,
        ingredients=list(ingredients),
        constraints=constraints,
    )

    console.print("[dim]Generating meal plan...[/dim]")
    try:
        draft = generate_meal_plan(request, config)
    except ConfigurationError:
        _fail("ANTHROPIC_API_KEY environment variable is not set.")
    except (ProviderError, MalformedResponseError) as e:
        err_console.print(f"[red]Meal plan generation failed:[/red] {escape(str(e))}")
        err_console.print("Please try again.")
        raise SystemExit(1)

    console.print()
    console.print(format_meal_plan(draft), markup=False)

    if save:
        saved = MealPlanBook(config.data_dir).save(draft, ingredients_input=normalize_ingredients(list(ingredients)))
        console.print(f"\n[green]✓[/green] Saved as [bold]{saved.id}[/bold]")


@plan.command("list")
def plan_list():
    """Show saved meal plans, newest first."""
    plans = MealPlanBook(_load_config().data_dir).list()
    if not plans:
        console.print("No saved meal plans. Run [bold]chef plan new --save[/bold] to add one.")
        return

    table = Table(title="Meal Plans")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Type")
    table.add_column("People", justify="right")
    table.add_column("Days", justify="right")
    table.add_column("Meals", justify="right")
    table.add_column("Prep", justify="right")
    for p in plans:
        table.add_row(
            p.id,
            escape(p.title),
            escape(p.plan_type),
            str(p.people),
            str(p.days),
            str(p.total_meals),
            f"~{p.total_prep_time_hours:g}h",
        )
    console.print(table)


@plan.command("show")
@click.argument("plan_id")
def plan_show(plan_id: str):
    """Print a saved meal plan."""
    try:
        saved = MealPlanBook(_load_config().data_dir).get(plan_id)
    except FileNotFoundError as e:
        _fail(str(e))
    console.print(format_meal_plan(saved), markup=False)


@plan.command("delete")
@click.argument("plan_id")
def plan_delete(plan_id: str):
    """Delete a saved meal plan."""
    try:
        MealPlanBook(_load_config().data_dir).delete(plan_id)
    except FileNotFoundError as e:
        _fail(str(e))
    console.print(f"[green]✓[/green] Deleted meal plan {escape(plan_id)}")
