"""Break the Bricks game logic: entities, physics, phases and skins."""
