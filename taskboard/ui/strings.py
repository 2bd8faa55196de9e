"""User-facing text (sr-Latn)."""

SUCCESS_TITLE = "Uspešno!"
ERROR_TITLE = "Greška"

LOAD_FAILED = "Nije moguće učitati zadatke"
DELETED = "Zadatak je obrisan"
DELETE_FAILED = "Nije moguće obrisati zadatak"
STATUS_UPDATED = "Status zadatka je ažuriran"
STATUS_FAILED = "Nije moguće ažurirati status"
CREATED = "Zadatak je kreiran"
CREATE_FAILED = "Nije moguće kreirati zadatak"
UPDATED = "Zadatak je ažuriran"
UPDATE_FAILED = "Nije moguće ažurirati zadatak"
SIGN_OUT_FAILED = "Nije moguće odjaviti se"
SIGN_IN_FAILED = "Nije moguće prijaviti se"
STORE_UNREACHABLE = "Servis zadataka trenutno nije dostupan"

STATUS_PENDING = "Na čekanju"
STATUS_IN_PROGRESS = "U toku"
STATUS_COMPLETED = "Završeno"

PRIORITY_LOW = "Nizak"
PRIORITY_MEDIUM = "Srednji"
PRIORITY_HIGH = "Visok"

ACTION_START = "Počni"
ACTION_COMPLETE = "Završi"
ACTION_REOPEN = "Vrati na čekanje"

LOADING = "Učitava..."
ADD_TASK = "Dodaj zadatak"
SIGN_OUT = "Odjavi se"
SIGN_IN = "Prijavi se"
EMAIL = "E-pošta"
EMPTY_TITLE = "Nema zadataka"
EMPTY_HINT = "Dodajte prvi zadatak da biste počeli"
DUE_PREFIX = "Rok"
EDIT = "Izmeni"
DELETE = "Obriši"

FORM_EDIT_TITLE = "Izmeni zadatak"
FORM_CREATE_TITLE = "Dodaj novi zadatak"
FIELD_TITLE = "Naslov *"
FIELD_DESCRIPTION = "Opis"
FIELD_PRIORITY = "Prioritet"
FIELD_DUE_DATE = "Rok"
TITLE_REQUIRED = "Naslov je obavezan"
SAVING = "Čuva..."
SUBMIT_UPDATE = "Ažuriraj"
SUBMIT_CREATE = "Kreiraj"
CANCEL = "Otkaži"
