from .errors import AlertError, DuplicateNameError, NotFoundError, MalformedDateError, TransportError
from .policy import ThresholdPolicy, Decision
from .store import AlertStore
from .service import AlertService
from .evaluator import AlertEvaluator, PassResult
from .scheduler import AlertScheduler
