"""
Views rendered inside tenant panels.
"""

from django.http import HttpResponse
from django.utils.decorators import method_decorator
from django.views.decorators.cache import never_cache
from django.views.generic import TemplateView

from panel_tenancy.context_processors import get_tenant_context
from panel_tenancy.decorators import tenant_page


@method_decorator([never_cache, tenant_page], name="dispatch")
class TenantHomeView(TemplateView):
    """Branded landing page of a tenant panel."""

    template_name = "panel_tenancy/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["tenant"] = get_tenant_context(self.request)
        return context


@never_cache
@tenant_page
def theme_stylesheet(request):
    """Serve the tenant palette as a stylesheet for pages outside the shell."""
    context = get_tenant_context(request)
    return HttpResponse(context.theme_css, content_type="text/css; charset=utf-8")
