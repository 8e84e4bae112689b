"""
Page views.

Thin on purpose: the templates are what show {% static %} in use.
"""

from django.shortcuts import render


def home_view(request):
    return render(request, "pages/home.html")
