"""
DRF views for django-panel-tenancy.
"""

from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from panel_tenancy.drf.permissions import HasTenantRoute
from panel_tenancy.drf.serializers import RenderContextSerializer
from panel_tenancy.resolvers import resolve_render_context


class TenantBrandingView(APIView):
    """
    Return the current tenant's branding for client-side rendering.

    Responds 404 with a generic message when the tenant config cannot
    be resolved; backend details are never exposed.
    """

    authentication_classes = []
    permission_classes = [HasTenantRoute]

    def get(self, request):
        context = resolve_render_context(request.tenant_route)
        if context is None:
            raise NotFound("Panel not found.")

        response = Response(RenderContextSerializer(context).data)
        response["Cache-Control"] = "no-store"
        return response
