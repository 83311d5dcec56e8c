"""Registry of special forms for the malt evaluator.

Maps symbol names to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before evaluating any operand of a
list, so the operands reach the handler unevaluated.

Every handler has the signature (tail, env, evaluate_fn) -> Result[Node].
"""

from malt.evaluation.special_forms.define_form import define_form
from malt.evaluation.special_forms.let_form import let_form
from malt.evaluation.special_forms.if_form import if_form
from malt.evaluation.special_forms.do_form import do_form

SPECIAL_FORMS = {
    "def!": define_form,
    "let*": let_form,
    "if": if_form,
    "do": do_form,
}
