# -*- coding: utf-8 -*-
"""
OLS of fare on trip distance, used for the regression line on the
fare-vs-distance scatter.
"""

import pandas as pd
import patsy
import statsmodels.api as sm

from trip_errors import EmptyResultError
from trip_features import DISTANCE_COL
from trip_loader import FARE_COL


def fit_fare_distance_ols(df: pd.DataFrame, y_col: str = FARE_COL, x_col: str = DISTANCE_COL):
    """
    Fit y_col ~ x_col (with intercept) on rows where both are present.
    Returns the statsmodels results object.
    """
    sub = df[[y_col, x_col]].dropna()
    if len(sub) < 2:
        raise EmptyResultError(
            f"Need at least 2 rows with {y_col} and {x_col} to fit OLS; got {len(sub)}."
        )

    y, X = patsy.dmatrices(f"{y_col} ~ {x_col}", data=sub, return_type="dataframe")
    model = sm.OLS(y, X).fit()

    print(f"OLS {y_col} ~ {x_col}: n={int(model.nobs):,}, R^2={model.rsquared:.3f}")
    return model


def regression_line(model) -> tuple[float, float]:
    """(intercept, slope) of a single-regressor fit."""
    params = model.params
    return float(params["Intercept"]), float(params.drop("Intercept").iloc[0])


def coeff_table(model, drop_const=False):
    params = model.params
    bse = model.bse
    tvals = model.tvalues
    pvals = model.pvalues

    df_coef = pd.DataFrame({
        "param": params.index,
        "coef": params.values,
        "std_err": bse.values,
        "t": tvals.values,
        "pvalue": pvals.values,
    })

    if drop_const:
        df_coef = df_coef[df_coef["param"] != "Intercept"]

    return df_coef.reset_index(drop=True)
