"""Factory helpers for creating and clearing the main menu entities."""
from esper import World

from summatch.menu.components import MenuAction, MenuBackground, MenuButton, MenuTag


def spawn_main_menu(world: World, width: int, height: int) -> None:
    """Create the menu background and one button per play mode."""
    clear_main_menu(world)
    center_x = width / 2
    center_y = height / 2

    world.create_entity(MenuBackground(), MenuTag())

    button_specs = (
        ("Classic", MenuAction.CLASSIC, center_y + 20.0, "A new row rises after every match."),
        ("Timed", MenuAction.TIMED, center_y - 80.0, "Beat the countdown or the stack rises."),
    )
    for label, action, y_position, caption in button_specs:
        world.create_entity(
            MenuButton(
                label=label,
                action=action,
                x=center_x,
                y=y_position,
                caption=caption,
            ),
            MenuTag(),
        )


def clear_main_menu(world: World) -> None:
    """Remove all entities that are part of the menu UI."""
    to_delete = {ent for ent, _ in world.get_component(MenuTag)}
    for ent in to_delete:
        world.delete_entity(ent, immediate=True)
