"""Templates that turn a computed stepper into displayable output.

A template is a callable taking the render context, a mapping that
always holds the stepper under the ``stepper`` key plus any extra data
passed to ``Stepper.render``. Templates are registered by name so a
config file can select one.
"""

from collections.abc import Callable, Mapping
from typing import Any

from rich.table import Table
from rich.text import Text

from .errors import TemplateNotFoundError
from .models import Step

Template = Callable[[Mapping[str, Any]], Any]

TEMPLATES: dict[str, Template] = {}

STATUS_STYLES = {
    "passed": "green",
    "current": "bold cyan",
    "upcoming": "dim",
}


def register_template(name: str) -> Callable[[Template], Template]:
    """Register the decorated function as the template called name."""

    def decorator(func: Template) -> Template:
        TEMPLATES[name] = func
        return func

    return decorator


def render_template(name: str, context: Mapping[str, Any]) -> Any:
    """Render the template registered under name.

    Raises:
        TemplateNotFoundError: If no template is registered under name
    """
    template = TEMPLATES.get(name)
    if template is None:
        raise TemplateNotFoundError(f"Template not found: {name}")
    return template(context)


def _label(step: Step) -> str:
    return getattr(step, "display_label", step.name)


@register_template("default")
def breadcrumb(context: Mapping[str, Any]) -> Text:
    """One-line breadcrumb: passed steps ticked, current step bracketed."""
    separator = context.get("separator", " › ")
    text = Text()
    if context.get("title"):
        text.append(f"{context['title']} ", style="bold")
    for step in context["stepper"]:
        if not step.is_first:
            text.append(separator, style="dim")
        label = _label(step)
        if step.is_passed:
            label = f"✓ {label}"
        elif step.is_current:
            label = f"[{label}]"
        text.append(label, style=STATUS_STYLES[step.status])
    return text


@register_template("compact")
def compact(context: Mapping[str, Any]) -> str:
    """Position of the current step, e.g. "Step 2 of 3: payment"."""
    stepper = context["stepper"]
    current = stepper.get_current_step()
    if current is None:
        return "No current step"
    index = sum(1 for step in stepper if step.is_passed) + 1
    return f"Step {index} of {len(stepper)}: {_label(current)}"


@register_template("table")
def table(context: Mapping[str, Any]) -> Table:
    """Table with one row per step and its status."""
    result = Table(title=context.get("title"))
    result.add_column("#", justify="right")
    result.add_column("Step")
    result.add_column("Status")
    for i, step in enumerate(context["stepper"], start=1):
        style = STATUS_STYLES[step.status]
        result.add_row(str(i), _label(step), step.status, style=style)
    return result
