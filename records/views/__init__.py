from django.shortcuts import redirect, render
from django.contrib import messages

from ..services import ActionResult, Message, Navigate


def render_form(request, template, context, result=None):
    """Redirect on Navigate; otherwise render the form with the action's state next to the inputs."""
    if isinstance(result, Navigate):
        return redirect(result.path)
    state = (result or ActionResult()).to_state()
    return render(request, template, {**context, "state": state})


def flash_result(request, result):
    if isinstance(result, Message):
        if result.ok:
            messages.success(request, result.message)
        else:
            messages.error(request, result.message)
