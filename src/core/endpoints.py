"""REST endpoint registry.

Templates use ``str.format`` placeholders; call :func:`resolve` to substitute
URL-quoted identifiers.
"""

from types import MappingProxyType
from urllib.parse import quote


def _group(**templates: str) -> MappingProxyType:
    return MappingProxyType(templates)


ADMIN_USERS = _group(
    LIST="/admin/liste-utilisateurs",
    BLOCKED="/admin/liste-utilisateurs-bloques",
    DELETED="/admin/liste-utilisateurs-supprimes",
    CREATE="/admin/creer-utilisateur-admin",
    DETAIL="/admin/utilisateur/{uuid}",
    UPDATE="/admin/modifier-utilisateur-par-admin/{uuid}",
    DELETE="/admin/utilisateur/{uuid}",
    BLOCK="/admin/utilisateur/{uuid}/bloquer",
    UNBLOCK="/admin/utilisateur/{uuid}/debloquer",
    RESTORE="/admin/restaurer-utilisateur/{uuid}",
)

PAYS = _group(
    LIST="/pays/liste-pays",
    ACTIFS="/pays/actifs",
    BY_CODE="/pays/by-code/{code}",
    BY_NOM="/pays/by-nom/{nom}",
    TOGGLE_STATUS="/pays/{uuid}/toggle-status",
    DETAIL="/pays/{uuid}",
    CREATE="/pays/creer",
    UPDATE="/pays/{uuid}",
    UPDATE_INDICATIF="/pays/{uuid}/indicatif/{indicatif}",
    DELETE="/pays/{uuid}",
)

ROLES = _group(
    LIST="/roles",
    DETAIL="/roles/{uuid}",
    CREATE="/roles",
    UPDATE="/roles/{uuid}",
    DELETE="/roles/{uuid}",
    STATUS="/roles/{uuid}/status",
)

STATUTS_MATRIMONIAUX = _group(
    LIST="/statuts-matrimoniaux/liste-statuts",
    ALL="/statuts-matrimoniaux/all",
    ACTIFS="/statuts-matrimoniaux/actifs",
    DETAIL="/statuts-matrimoniaux/{uuid}",
    CREATE="/statuts-matrimoniaux/creer",
    UPDATE="/statuts-matrimoniaux/{uuid}",
    DELETE="/statuts-matrimoniaux/{uuid}",
)

MESSAGERIE = _group(
    SEND="/messagerie/envoyer",
    PUBLIC_SEND="/messagerie/public/envoyer",
    RECEIVED="/messagerie/recus",
    SENT="/messagerie/envoyes",
    DETAIL="/messagerie/message/{uuid}",
    UPDATE="/messages/{uuid}",
    DELETE="/messages/{uuid}",
    MARK_READ="/messagerie/marquer-lu/{uuid}",
    MARK_UNREAD="/messagerie/marquer-non-lu/{uuid}",
    ARCHIVE="/messagerie/archiver/{uuid}",
    REPLY="/messagerie/repondre",
    STATS="/messagerie/statistiques",
    CONVERSATIONS="/conversations",
    CONVERSATION_DETAIL="/conversations/{uuid}",
)

FAVORIS = _group(
    LIST="/favoris",
    CREATE="/favoris",
    DETAIL="/favoris/{uuid}",
    UPDATE="/favoris/{uuid}",
    DELETE="/favoris/{uuid}",
    INCREMENT_VIEWS="/favoris/{uuid}/vues",
    COLLECTIONS="/favoris/collections",
    COLLECTIONS_CREATE="/favoris/collections",
    COLLECTION_DETAIL="/favoris/collections/{uuid}",
    COLLECTION_UPDATE="/favoris/collections/{uuid}",
    COLLECTION_DELETE="/favoris/collections/{uuid}",
)

PRODUITS = _group(
    LIST="/produits",
    PUBLISHED="/produits/published",
    VENDEUR="/produits/liste-produits-cree-vendeur",
    DETAIL="/produits/{uuid}",
    BY_SLUG="/produits/slug/{slug}",
    CREATE="/produits/creer",
    UPDATE="/produits/{uuid}",
    DELETE="/produits/{uuid}",
    BLOCK="/produits/{uuid}/bloquer",
    UNBLOCK="/produits/{uuid}/debloquer",
    RESTORE="/produits/{uuid}/restore",
    UPDATE_STOCK="/produits/stock-produit-vendeur/{uuid}",
)

ECHANGES = _group(
    LIST="/echanges/liste-de-toutes-echanges",
    PUBLISHED="/echanges/liste-toutes-echanges-publiees",
    BY_STATUS="/echanges/statut/{statut}",
    DETAIL="/echanges/{uuid}",
    CREATE="/echanges/creer-vendeur-agent-utilisateur",
    UPDATE="/echanges/{uuid}",
    DELETE="/echanges/{uuid}",
    ACCEPT="/echanges/{uuid}/accept",
    REFUSE="/echanges/{uuid}/refuse",
)

HEALTH = "/"


def resolve(template: str, **params: object) -> str:
    """Fill a template with URL-quoted parameter values."""
    quoted = {key: quote(str(value), safe="") for key, value in params.items()}
    return template.format(**quoted)
