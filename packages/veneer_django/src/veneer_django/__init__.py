"""
veneer_django: Django integration for veneer.

Add ``"veneer_django"`` to ``INSTALLED_APPS`` to:

- install :class:`~veneer_django.helpers.DjangoHelpers` as the helpers backend,
- serialize Django models in ``Decorator.serializable_dict()``,
- import every installed app's ``decorators`` module at startup,
- enable the ``veneer_tags`` template filter library.

Models opt in with the :class:`veneer.Decoratable` mixin and a
:class:`~veneer_django.querysets.DecoratableManager`.
"""
