import pytest

from flappy_sim.config import GameConfig
from flappy_sim.data_models import ActorState, ObstaclePair, SimulationState
from flappy_sim.physics_core import PhysicsCore

from conftest import RecordingObserver

ACTOR_X = 120


def make_state(actor_y=288.0, obstacles=()):
    return SimulationState(
        actor=ActorState(y=actor_y),
        obstacles=list(obstacles),
        play_width=400,
        play_height=600,
    )


def make_pair(obstacle_id=1, x=500.0, width=48.0, gap=(200.0, 340.0)):
    return ObstaclePair(id=obstacle_id, x=x, width=width, height=600.0,
                        gap_top=gap[0], gap_bottom=gap[1])


class TestActor:

    def test_gravity_step_from_rest(self):
        physics = PhysicsCore(GameConfig())
        actor = ActorState(y=0.0, velocity=0.0)

        hit_floor = physics.step_actor(actor, 600)

        assert not hit_floor
        assert actor.velocity == 0.25
        assert actor.y == 0.25

    def test_ceiling_stops_without_bounce(self):
        physics = PhysicsCore(GameConfig())
        actor = ActorState(y=3.0, velocity=-7.0)

        assert not physics.step_actor(actor, 600)
        assert actor.y == 0
        assert actor.velocity == 0

    def test_floor_is_reported_and_clamped(self):
        physics = PhysicsCore(GameConfig())
        actor = ActorState(y=575.0, velocity=3.0)

        assert physics.step_actor(actor, 600)
        assert actor.y == 600 - 24

    def test_resting_exactly_on_floor_is_not_a_hit(self):
        physics = PhysicsCore(GameConfig(gravity=0.0))
        actor = ActorState(y=576.0, velocity=0.0)

        assert not physics.step_actor(actor, 600)

    def test_jump_strength(self):
        assert PhysicsCore(GameConfig()).jump() == -7


class TestObstacles:

    def test_moves_by_pipe_speed(self):
        physics = PhysicsCore(GameConfig())
        pair = make_pair(x=300)
        state = make_state(obstacles=[pair])
        observer = RecordingObserver()

        assert not physics.step_obstacles(state, ACTOR_X, observer)

        assert pair.x == 297.75
        assert pair.top_rect.x == 297.75
        assert pair.bottom_rect.y == 340
        assert observer.names("obstacle_moved") == [(1, pair.top_rect, pair.bottom_rect)]

    def test_scores_once_when_trailing_edge_passes_actor(self):
        physics = PhysicsCore(GameConfig())
        pair = make_pair(x=74.0)    # right edge 122 -> 119.75 after one step
        state = make_state(obstacles=[pair])
        observer = RecordingObserver()

        physics.step_obstacles(state, ACTOR_X, observer)
        physics.step_obstacles(state, ACTOR_X, observer)

        assert pair.passed
        assert state.score == 1
        assert observer.names("score_changed") == [(1,)]

    def test_not_scored_while_trailing_edge_level_with_actor(self):
        physics = PhysicsCore(GameConfig())
        pair = make_pair(x=74.25)   # right edge lands exactly on 120
        state = make_state(obstacles=[pair])

        physics.step_obstacles(state, ACTOR_X, RecordingObserver())

        assert not pair.passed
        assert state.score == 0

    def test_collision_with_top_pipe(self):
        physics = PhysicsCore(GameConfig())
        state = make_state(actor_y=100.0, obstacles=[make_pair(x=130)])

        assert physics.step_obstacles(state, ACTOR_X, RecordingObserver())

    def test_collision_with_bottom_pipe(self):
        physics = PhysicsCore(GameConfig())
        state = make_state(actor_y=330.0, obstacles=[make_pair(x=130)])

        assert physics.step_obstacles(state, ACTOR_X, RecordingObserver())

    def test_actor_inside_gap_is_safe(self):
        physics = PhysicsCore(GameConfig())
        state = make_state(actor_y=288.0, obstacles=[make_pair(x=130)])

        assert not physics.step_obstacles(state, ACTOR_X, RecordingObserver())

    def test_collision_stops_the_pass(self):
        physics = PhysicsCore(GameConfig())
        older = make_pair(obstacle_id=1, x=500)
        newer = make_pair(obstacle_id=2, x=100)
        state = make_state(actor_y=100.0, obstacles=[older, newer])
        observer = RecordingObserver()

        assert physics.step_obstacles(state, ACTOR_X, observer)

        # Newest first; the older pair is never reached
        assert newer.x == 97.75
        assert older.x == 500
        assert [args[0] for args in observer.names("obstacle_moved")] == [2]

    def test_removed_once_right_edge_passes_margin(self):
        physics = PhysicsCore(GameConfig())
        pair = make_pair(x=500, width=60)
        state = make_state(obstacles=[pair])
        observer = RecordingObserver()

        steps = 0
        while pair in state.obstacles:
            previous_x = pair.x
            physics.step_obstacles(state, ACTOR_X, observer)
            steps += 1

        assert steps == 254
        assert previous_x >= -70
        assert pair.x == pytest.approx(-71.5)
        assert observer.names("obstacle_removed") == [(1,)]

    def test_removal_keeps_spawn_order(self):
        physics = PhysicsCore(GameConfig())
        gone = make_pair(obstacle_id=1, x=-57)
        middle = make_pair(obstacle_id=2, x=200)
        newest = make_pair(obstacle_id=3, x=400)
        state = make_state(obstacles=[gone, middle, newest])

        physics.step_obstacles(state, ACTOR_X, RecordingObserver())

        assert [p.id for p in state.obstacles] == [2, 3]
        xs = [p.x for p in state.obstacles]
        assert xs == sorted(xs)
