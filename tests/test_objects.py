from rogueai.components import (
    RED,
    WHITE,
    Actions,
    Color,
    Hitpoints,
    MeleeDamage,
    MoveSpeed,
    NumActions,
    PlayerInput,
    Team,
)
from rogueai.objects import (
    IsPlayer,
    MonsterSpawner,
    Position,
    TextureSource,
    Velocity,
    create_monster,
    create_player,
)
from rogueai.vecmath import Vec2
from rogueai.world import World


def test_monster_components():
    world = World()
    m = create_monster(world, Vec2(3.0, 4.0), RED, "minotaur_tex")
    assert m.get(Position) == Position(3.0, 4.0)
    assert m.get(Velocity) == Velocity(0.0, 0.0)
    assert m.get(MoveSpeed) == MoveSpeed(100.0)
    assert m.get(Hitpoints) == Hitpoints(100.0)
    assert m.get(Actions) is Actions.NOP
    assert m.get(Color) == RED
    assert m.get(Team) == Team(1)
    assert m.get(NumActions) == NumActions(1, 0)
    assert m.get(MeleeDamage) == MeleeDamage(20.0)
    assert not m.has(IsPlayer)


def test_monster_texture_relation_is_named_entity():
    world = World()
    m = create_monster(world, Vec2(), WHITE, "minotaur_tex")
    tex = world.lookup("minotaur_tex")
    assert m.has(TextureSource, tex)


def test_monsters_share_texture_entity():
    world = World()
    a = create_monster(world, Vec2(), WHITE, "minotaur_tex")
    b = create_monster(world, Vec2(), WHITE, "minotaur_tex")
    assert a is not b
    assert a.get(TextureSource) is b.get(TextureSource)
    assert len(world) == 3


def test_player_components():
    world = World()
    p = create_player(world, Vec2(1.0, 2.0), "swordsman_tex")
    assert world.lookup("player") is p
    assert p.has(IsPlayer)
    assert p.get(Position) == Position(1.0, 2.0)
    assert p.get(MoveSpeed) == MoveSpeed(350.0)
    assert p.get(Team) == Team(0)
    assert p.get(PlayerInput) == PlayerInput()
    assert p.get(NumActions) == NumActions(2, 0)
    assert p.get(Color) == WHITE
    assert p.get(MeleeDamage) == MeleeDamage(50.0)
    assert p.has(TextureSource, world.lookup("swordsman_tex"))


def test_player_speed_override():
    world = World()
    p = create_player(world, Vec2(), "swordsman_tex", speed=150.0)
    assert p.get(MoveSpeed) == MoveSpeed(150.0)


def test_player_is_unique():
    world = World()
    a = create_player(world, Vec2(0.0, 0.0), "swordsman_tex")
    b = create_player(world, Vec2(5.0, 5.0), "swordsman_tex")
    assert a is b
    assert b.get(Position) == Position(5.0, 5.0)
    assert len(list(world.query(IsPlayer))) == 1


def test_position_is_distinct_from_velocity():
    assert Position(1.0, 1.0) != Velocity(1.0, 1.0)
    assert Position(1.0, 1.0) + Position(1.0, 0.0) == Vec2(2.0, 1.0)


def test_monster_spawner_fields():
    spawner = MonsterSpawner(0.0, 0.1)
    spawner.time_to_spawn -= 0.5
    assert spawner.time_to_spawn == -0.5
    assert spawner.time_between_spawns == 0.1