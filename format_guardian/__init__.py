"""
Format Guardian
===============
Action GitHub qui repère les fichiers à formater dans une Pull Request,
poste un commentaire récapitulatif et pose le label ``needs-formatting``.
"""

__version__ = "1.0.0"
