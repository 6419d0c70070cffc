from dataclasses import dataclass
from typing import Optional

from ..core.utils import normalize_text, format_inr
from ..data.base import PropertyDetails
from ..dialogue.intents import Intent, IntentClassifier, mentioned_city
from ..dialogue.responses import NO_MESSAGE, render
from ..models.base import ValuationModel
from ..models.rule_model import RuleBasedModel

ESTIMATE_SENTENCE = "\n\nBased on the provided details, I estimate the property value to be approximately {price}."

@dataclass(frozen=True)
class Reply:
    text: str
    prediction: Optional[int] = None
    intent: Optional[Intent] = None   # None when no classification ran

class DialogueService:
    """
    Orchestrates:
      message → intent → templated text
      details → estimate → sentence appended to the text
    Stateless: the same arguments (and clock) always give the same Reply.
    """
    def __init__(self, classifier: IntentClassifier | None = None, model: ValuationModel | None = None):
        self.classifier = classifier or IntentClassifier()
        self.model = model or RuleBasedModel()

    def resolve_intent(self, message: str) -> Intent:
        # Kolkata always gets its city reply, ahead of the normal rule order.
        # Kept literally; other cities go through the classifier.
        if normalize_text(message) == "kolkata" or mentioned_city(message) == "kolkata":
            return Intent.city_investment("kolkata")
        return self.classifier.classify(message)

    def handle(self, message: str | None, details: PropertyDetails | None = None) -> Reply:
        intent = None
        if not message or not message.strip():
            text = NO_MESSAGE
        else:
            intent = self.resolve_intent(message)
            text = render(intent)

        prediction = None
        if details is not None:
            # InvalidInput propagates to the caller
            prediction = self.model.estimate(details)
            text += ESTIMATE_SENTENCE.format(price=format_inr(prediction))

        return Reply(text=text, prediction=prediction, intent=intent)
