# src/alphacala/api/routes.py
from flask import current_app
from flask_smorest import Blueprint, abort
from marshmallow import Schema, ValidationError, fields, validate, validates_schema, EXCLUDE

from alphacala import config
from alphacala.agents.alpha_beta import choose_move
from alphacala.engine.core import (
    BOARD_SIZE, MAX_TOTAL_SEEDS, board_from_list, is_legal_move, legal_moves, new_board, play_move,
)

bp = Blueprint("alphacala", __name__, url_prefix="/api")

# ---------- Schemas ----------
class StateSchema(Schema):
    class Meta: unknown = EXCLUDE
    board = fields.List(fields.Integer(validate=validate.Range(min=0, max=255)),
                        required=True, validate=validate.Length(equal=BOARD_SIZE))
    current_player = fields.Integer(required=True, validate=validate.OneOf([0, 1]))

    @validates_schema
    def check_total(self, data, **kwargs):
        total = sum(data.get("board", []))
        if total > MAX_TOTAL_SEEDS:
            raise ValidationError(f"board holds {total} seeds, at most {MAX_TOTAL_SEEDS}", "board")

class NewGameReqSchema(Schema):
    class Meta: unknown = EXCLUDE
    seeds = fields.Integer(load_default=None)

class ApplyReqSchema(Schema):
    class Meta: unknown = EXCLUDE
    state  = fields.Nested(StateSchema, required=True)
    action = fields.Integer(load_default=None)

class MoveReqSchema(Schema):
    class Meta: unknown = EXCLUDE
    state = fields.Nested(StateSchema, required=True)
    depth = fields.Integer(load_default=None, validate=validate.Range(min=0))

class ApplyRespSchema(Schema):
    action     = fields.Integer(allow_none=True)
    next_state = fields.Nested(StateSchema)
    play_again = fields.Boolean()
    done       = fields.Boolean()

class MoveRespSchema(ApplyRespSchema):
    evaluation = fields.Integer()
# -----------------------------

def _state(board, a_turn: bool) -> dict:
    return {"board": [int(v) for v in board], "current_player": 0 if a_turn else 1}

def _step(state: dict, action: int) -> dict:
    """Apply a legal `action` to a copy of the posted state."""
    board = board_from_list(state["board"])
    a_turn = state["current_player"] == 0
    play_again = play_move(board, action)
    next_a = a_turn if play_again else not a_turn
    return {
        "action": action,
        "next_state": _state(board, next_a),
        "play_again": play_again,
        "done": not legal_moves(board, next_a),
    }

@bp.route("/health")
@bp.response(200, Schema.from_dict({"status": fields.String(), "depth": fields.Integer()},
                                 name="HealthResp")())
def health():
    return {"status": "ok", "depth": config.SEARCH_DEPTH}

@bp.route("/newgame", methods=["POST"])
@bp.arguments(NewGameReqSchema, required=False)
@bp.response(200, Schema.from_dict({"state": fields.Nested(StateSchema)}, name="NewGameResp")())
def newgame(req):
    try:
        board = new_board(req.get("seeds"))
    except ValueError as e:
        abort(400, message=str(e))
    return {"state": _state(board, True)}

@bp.route("/apply", methods=["POST"])  # human move
@bp.arguments(ApplyReqSchema)
@bp.response(200, ApplyRespSchema)
def apply(req):
    a = req.get("action")
    state = req["state"]
    board = board_from_list(state["board"])
    a_turn = state["current_player"] == 0
    if a is None or not is_legal_move(board, a, a_turn):
        abort(400, message=f"Illegal or missing action. Legal: {legal_moves(board, a_turn)}")
    return _step(state, a)

@bp.route("/move", methods=["POST"])   # engine move
@bp.arguments(MoveReqSchema)
@bp.response(200, MoveRespSchema)
def move(req):
    state = req["state"]
    depth = req.get("depth")
    depth = config.API_DEPTH if depth is None else min(depth, config.API_DEPTH)

    board = board_from_list(state["board"])
    a_turn = state["current_player"] == 0
    value, a = choose_move(board, a_turn, depth)
    current_app.logger.info("move: player=%d depth=%d action=%s eval=%d",
                            state["current_player"], depth, a, value)

    if a is None:
        return {"action": None, "evaluation": value, "next_state": state,
                "play_again": False, "done": True}
    return {**_step(state, a), "evaluation": value}
