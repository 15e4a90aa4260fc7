import logging
import random
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from config import Settings, load_settings
from domain.errors import InvalidGameStateError
from domain.game_state import GameState, game_id_from_payload
from players.base import Player
from players.greedy_player import GreedyPlayer
from players.variant_registry import get_player_class

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def build_player(settings: Settings, rng: Optional[random.Random] = None) -> Player:
    """Instantiate the configured player variant."""
    if rng is None:
        rng = random.Random(settings.random_seed)
    player_cls = get_player_class(settings.player_variant)
    if issubclass(player_cls, GreedyPlayer):
        return player_cls(rng=rng, legacy_vertical_gate=settings.legacy_vertical_gate)
    return player_cls(rng=rng)


def create_app(settings: Optional[Settings] = None, player: Optional[Player] = None) -> Flask:
    """
    Build the Battlesnake webhook app.

    Args:
        settings: runtime settings; read from the environment when omitted
        player: the player answering /move; built from settings when omitted
    """
    settings = settings or load_settings()
    player = player or build_player(settings)

    app = Flask(__name__)
    app.config["SNAKE_SETTINGS"] = settings

    # The board viewer runs in the browser, so GET / can be a cross-origin call
    CORS(app, resources={r"/*": {"origins": settings.cors_allowed_origins}})

    @app.route("/", methods=["GET"])
    def on_info():
        """
        Appearance and metadata, requested when the snake is added to a game.
        """
        logger.info("INFO")
        return jsonify({
            "apiversion": "1",
            "author": settings.author,
            "color": settings.color,
            "head": settings.head,
            "tail": settings.tail,
            "version": VERSION,
        })

    @app.route("/start", methods=["POST"])
    def on_start():
        game_id = game_id_from_payload(request.get_json(silent=True))
        logger.info(f"GAME START: {game_id}")
        return "ok"

    @app.route("/move", methods=["POST"])
    def on_move():
        """
        Decide this turn's move.

        Returns {"move": "up" | "down" | "left" | "right"}, or a 400 if the
        payload does not describe a playable board.
        """
        payload = request.get_json(silent=True)
        try:
            game_state = GameState.from_payload(payload)
        except InvalidGameStateError as error:
            logger.warning(f"Rejected move request: {error}")
            return jsonify({"error": str(error)}), 400

        try:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"TURN {game_state.turn}\n{game_state.print_board()}")
            direction = player.get_move(game_state)
        except Exception as error:
            logger.error(f"Error choosing move for game {game_state.game_id} turn {game_state.turn}: {error}")
            return jsonify({"error": "Failed to choose a move"}), 500

        logger.info(f"MOVE {game_state.turn}: {direction.value}")
        return jsonify({"move": direction.value})

    @app.route("/end", methods=["POST"])
    def on_end():
        game_id = game_id_from_payload(request.get_json(silent=True))
        logger.info(f"GAME OVER: {game_id}")
        return "ok"

    @app.after_request
    def identify_server(response):
        response.headers.set("server", "battlesnake/flask/greedy-snake")
        return response

    return app
