from django import template

from bootsy.helpers import bootsy_editor as render_bootsy_editor

register = template.Library()


@register.simple_tag(takes_context=True)
def bootsy_editor(context, object_name, method, **options):
    """
    Renders a Trix editor bound to `object_name[method]`.

    Usage: {% bootsy_editor "post" "body" class="form-control" uploader=False %}
    The bound object defaults to the context variable named `object_name`.
    """
    if "object" not in options:
        options["object"] = context.get(object_name)
    return render_bootsy_editor(object_name, method, options)
