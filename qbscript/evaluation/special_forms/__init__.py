"""Registry of built-in forms for the qbscript evaluator.

Maps Symbols to handler functions. The evaluator consults this table before
anything else when a Call starts with a symbol, so these names cannot be
shadowed by `let`. A Call whose leading symbol is neither here nor bound in
the environment evaluates to itself.
"""

from qbscript.types.atom import Symbol
from qbscript.evaluation.special_forms.list_forms import cons_form, append_form, list_form, head_form, tail_form
from qbscript.evaluation.special_forms.logic_forms import atom_form, not_form, eq_form, ne_form, if_form, cond_form
from qbscript.evaluation.special_forms.compare_forms import lt_form, gt_form, le_form, ge_form
from qbscript.evaluation.special_forms.add_form import add_form
from qbscript.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    Symbol("cons"): cons_form,
    Symbol("append"): append_form,
    Symbol("list"): list_form,
    Symbol("head"): head_form,
    Symbol("tail"): tail_form,
    Symbol("atom"): atom_form,
    Symbol("not"): not_form,
    Symbol("eq"): eq_form,
    Symbol("ne"): ne_form,
    Symbol("lt"): lt_form,
    Symbol("gt"): gt_form,
    Symbol("le"): le_form,
    Symbol("ge"): ge_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
    Symbol("add"): add_form,
    Symbol("let"): let_form,
}
