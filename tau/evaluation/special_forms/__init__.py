"""Registry of special forms for the Tau evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. A handler receives the unevaluated argument forms, the
current environment and the evaluator, and returns either a value or a
TailCall for the evaluator loop to continue with.
"""

from tau.types.symbol import Symbol
from tau.evaluation.special_forms.define_form import define_form
from tau.evaluation.special_forms.let_form import let_form
from tau.evaluation.special_forms.quote_forms import quote_form, quasiquote_form
from tau.evaluation.special_forms.defmacro_form import defmacro_form
from tau.evaluation.special_forms.macroexpand_forms import macroexpand_form
from tau.evaluation.special_forms.try_form import try_form
from tau.evaluation.special_forms.progn_form import progn_form
from tau.evaluation.special_forms.if_form import if_form
from tau.evaluation.special_forms.lambda_form import lambda_form
from tau.evaluation.special_forms.env_forms import env_chain_form, which_env_form

SPECIAL_FORMS = {
    Symbol("def"): define_form,
    Symbol("let"): let_form,
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("defmacro"): defmacro_form,
    Symbol("macroexpand"): macroexpand_form,
    Symbol("try"): try_form,
    Symbol("do"): progn_form,
    Symbol("if"): if_form,
    Symbol("fn"): lambda_form,
    Symbol("env-chain"): env_chain_form,
    Symbol("which-env"): which_env_form,
}
