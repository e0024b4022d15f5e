import logging
from flask import Blueprint
from werkzeug.exceptions import HTTPException
from app.exceptions import StoreError
from app.utils.responses import error

errors_bp = Blueprint("errors_bp", __name__)

GENERIC_ERROR_MESSAGE = "Une erreur inattendue s'est produite. Veuillez réessayer plus tard."

HTTP_MESSAGES = {
    400: "Requête invalide",
    401: "Non autorisé",
    403: "Accès interdit",
    404: "Ressource non trouvée",
    405: "Méthode non autorisée",
    413: "Requête trop volumineuse",
    415: "Type de contenu non pris en charge",
    429: "Trop de requêtes, veuillez réessayer plus tard",
}


def http_message(e: HTTPException) -> str:
    # A description set on the instance (e.g. the login limiter's) is already localized
    if e.description and e.description != type(e).description:
        return e.description
    return HTTP_MESSAGES.get(e.code, GENERIC_ERROR_MESSAGE)


@errors_bp.app_errorhandler(StoreError)
def handle_store_error(e):
    return error(e.message, status=e.status, details=e.details)


@errors_bp.app_errorhandler(HTTPException)
def handle_http_exception(e):
    return error(http_message(e), status=e.code, code=e.code)


@errors_bp.app_errorhandler(Exception)
def handle_unexpected_exception(e):
    logging.exception("Unhandled exception")
    return error(GENERIC_ERROR_MESSAGE, status=500, code=500)
