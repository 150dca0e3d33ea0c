"""
Demo views for the main app.
"""

from django.http import HttpResponse

from panel_tenancy.conf import panel_tenancy_settings


def home(request):
    """Main app landing page - never tenant-branded."""
    main_domain = panel_tenancy_settings.MAIN_DOMAIN
    return HttpResponse(
        "<h1>SMM Panel platform</h1>"
        f"<p>Tenant panels are served at https://&lt;name&gt;.{main_domain}/ "
        "or on their own custom domain.</p>"
    )
