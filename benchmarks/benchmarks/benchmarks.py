import quadrule


def f_1d(x):
    a = 0.01
    return x + a**2 / (a**2 + (x - 0.3) ** 2)


class TimeGolubWelsch:
    params = [5, 20, 50]
    param_names = ["order"]

    def time_legendre(self, order):
        quadrule.legendre_compute(order)

    def time_jacobi(self, order):
        quadrule.jacobi_compute(order, 0.5, -0.25)

    def time_hermite(self, order):
        quadrule.hermite_compute(order)


class TimeNewton:
    params = [5, 20, 50]
    param_names = ["order"]

    def time_legendre_dr(self, order):
        quadrule.legendre_dr_compute(order)

    def time_gegenbauer(self, order):
        quadrule.gegenbauer_compute(order, 0.5)

    def time_lobatto(self, order):
        quadrule.lobatto_compute(order)


class TimeInterpolatory:
    params = [5, 65, 513]
    param_names = ["order"]

    def time_clenshaw_curtis(self, order):
        quadrule.clenshaw_curtis_compute(order)

    def time_fejer2(self, order):
        quadrule.fejer2_compute(order)


class TimeNewtonCotes:
    def time_ncc(self):
        quadrule.ncc_compute(21)


class TimeIntegrate:
    def setup(self):
        self.rule = quadrule.legendre_compute(200)

    def time_integrate(self):
        self.rule.integrate(f_1d)
