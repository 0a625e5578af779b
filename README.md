# spacefighter

The game logic of a small vertical-scrolling space shooter, written in plain
Python with no rendering or audio dependencies. Drawing, textures and sounds
go through objects you supply: a sprite batch with a `draw(...)` method,
textures with `center` and `size`, sounds with `play()`. That keeps the rules
easy to drive from any front end and easy to test on their own.

## What is inside

- `spacefighter.vector2.Vector2`: an immutable 2D vector with arithmetic,
  `length`, `normalized`, `dot`, `cross`, `distance`, `lerp`, `random`,
  `to_point` and `parse`.
- `spacefighter.region.Region`: an integer rectangle with edges, corners,
  `center` and `translate`.
- `spacefighter.flags.CollisionType` and `spacefighter.flags.TriggerType`:
  bit-mask flags for collision categories and weapon triggers, each with
  `contains`.
- `spacefighter.input`: keyboard, mouse and game-pad definitions (`Key`,
  `MouseButton`, `Button`, `ButtonState`, `GamePadState`, …).
- `spacefighter.resources.ResourceManager`: loads resources through their own
  `load(path, manager)` method, caches them by path, hands out clones of
  cloneable resources, and raises `ResourceLoadError` when loading fails.
- `spacefighter.particles`: `Particle`, `ParticleInitializer`,
  `ParticleUpdater`, `ParticleRenderer` and `ParticleEmitter`.
- `spacefighter.gameobject`: `GameTime`, `Viewport` (1600 × 900 by default),
  the `Attachable` and `Attachment` interfaces and the `GameObject` base.
- `spacefighter.projectile.Projectile`: shots that fly until they leave the
  screen.
- `spacefighter.weapons`: the `Weapon` base and the cooling-down `Blaster`.
- `spacefighter.ships`: `Ship`, `PlayerShip`, `EnemyShip`, `BioEnemyShip`
  and `Boss`.
- `spacefighter.explosion.Explosion`: an animation with an optional sound.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## A short example

```python
from spacefighter.flags import TriggerType
from spacefighter.gameobject import GameTime
from spacefighter.projectile import Projectile
from spacefighter.ships import EnemyShip
from spacefighter.vector2 import Vector2

a = Vector2(3, 4)
print(a.length())                                  # 5.0
print(Vector2.lerp(Vector2.ZERO, a, 0.5))          # { 1.5, 2 }

ship = EnemyShip()
ship.initialize(Vector2(800, 100), 0.0)            # attaches an "Enemy Blaster"
ship.activate()

blaster = ship.weapon("Enemy Blaster")
blaster.projectile_pool = [Projectile() for _ in range(10)]
ship.fire(TriggerType.PRIMARY)

shot = next(p for p in blaster.projectile_pool if p.is_active())
print(shot.position)                               # { 800, 80 }

time = GameTime()
time.advance(0.1)
shot.update(time)
print(shot.position)                               # { 800, 30 }
```

A game object reports its position each update to whatever level is set with
`GameObject.set_current_level`; a ship that is destroyed asks that level to
`spawn_explosion`, and drawing uses the level's `alpha`. With no level set,
these steps are skipped and drawing uses full opacity.

## What this package does not do

It has no level, no collision checking between objects and no game loop.
Nothing here spawns waves of enemies, pairs up objects to see which ones
touch, or runs frames: you create the objects, call their `update`,
`handle_input` and `draw` methods yourself, and supply the level object,
sprite batch, textures and sounds. There is no window, no menu and no command
to start a game.