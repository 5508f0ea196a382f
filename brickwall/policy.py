from .arena import GameState


def policy(env):
    # Strategy: keep the paddle centre under the ball centre. Moving only when
    # the gap exceeds one paddle step stops the paddle jittering around the
    # ball. Restart as soon as the round is lost.
    arena = env.arena
    if arena.state is GameState.GAME_OVER:
        return [0, 0, 1]  # Restart

    paddle, ball = arena.paddle, arena.ball
    dx = (ball.x + ball.width / 2) - (paddle.x + paddle.width / 2)

    if dx > paddle.speed:
        return [4, 0, 0]  # Move right
    elif dx < -paddle.speed:
        return [3, 0, 0]  # Move left
    else:
        return [0, 0, 0]  # Hold position
