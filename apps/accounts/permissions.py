from rest_framework import permissions

from .roles import Capability, has_capability


class HasCapability(permissions.BasePermission):
    """
    Permission: User's role must grant ``required_capability``.

    Use ``HasCapability.of(...)`` to build a concrete permission class.
    """

    required_capability: Capability = None

    def has_permission(self, request, view):
        return has_capability(request.user, self.required_capability)

    @classmethod
    def of(cls, capability: Capability):
        """Build a permission class for ``capability``."""
        name = ''.join(part.capitalize() for part in capability.value.split('_'))
        return type(f'Can{name}', (cls,), {
            'required_capability': capability,
            'message': f'Your role does not allow: {capability.value.replace("_", " ")}.',
        })
