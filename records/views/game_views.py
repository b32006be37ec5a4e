import logging

from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from ..game import GameState, mark, reset

logger = logging.getLogger(__name__)

SESSION_KEY = "tic_tac_toe"


@login_required
@require_http_methods(["GET", "POST"])
def tic_tac_toe(request):
    state = GameState.from_session(request.session.get(SESSION_KEY))

    if request.method == "POST":
        if "reset" in request.POST:
            state = reset()
        else:
            try:
                state = mark(state, int(request.POST.get("square", "")))
            except ValueError:
                logger.info("Ignoring invalid square %r", request.POST.get("square"))
        request.session[SESSION_KEY] = state.to_session()
        return redirect("records:tic_tac_toe")

    return render(request, "pages/game/tic_tac_toe.html", {
        "game": state,
        "squares": list(enumerate(state.squares)),
        "page_title": "Tic-Tac-Toe",
    })
