import pytest
from polyshift.xform import *
## unit tests for polyshift xform.py

class TestXform:
    """unit tests for polyshift matrix operations"""

    def test_matrix(self):
        foo = Matrix([1,2,3,4,5,6,7,8,9,10,11,12,13,14,15,16])
        fooT = Matrix(foo,True)
        bar = Matrix([[1,0,0,1],[0,1,0,1],[0,0,1,1],[0,0,0,1]])
        baz = geom.vect(1,2,3)
        I = Matrix()
        a = 10.0
        assert(I.mul(bar).m == bar.m)
        assert(I.mul(foo).m == foo.m)
        assert(I.mul(fooT).m == fooT.mul(I).m)
        assert(I.mul(I).m == I.m)
        assert(foo.mul(bar).m == [[1,2,3,10],[5,6,7,26],[9,10,11,42],[13,14,15,58]])
        assert(foo.mul(baz) == [18, 46, 74, 102])
        assert(foo.mul(a).m == [[10.0,20.0,30.0,40.0],
                                [50.0,60.0,70.0,80.0],
                                [90.0,100.0,110.0,120.0],
                                [130.0,140.0,150.0,160.0]])
        assert(I.mul(baz) == baz)
        ## homogeneous coordinates test
        assert(geom.homo(foo.mul(baz)) ==
               [18.0/102.0, 46.0/102.0, 74.0/102.0, 1.0])

    def test_transpose(self):
        foo = Matrix([1,2,3,4,5,6,7,8,9,10,11,12,13,14,15,16])
        fooT = Matrix(foo,True)
        assert fooT.get(0,1) == 5
        assert fooT.getrow(0) == [1,5,9,13]
        assert fooT.getcol(0) == [1,2,3,4]
        assert fooT.rows()[3] == [4,8,12,16]
        fooT.set(0,1,-1)
        assert foo.get(0,1) == 2
        assert fooT.m[1][0] == -1

    def test_bad_input(self):
        with pytest.raises(ValueError):
            Matrix([1,2,3])
        with pytest.raises(ValueError):
            Matrix("identity")
        with pytest.raises(ValueError):
            Matrix().get(4,0)
        with pytest.raises(ValueError):
            Matrix().mul("x")
        with pytest.raises(ValueError):
            Rotation(geom.point(0,0,0),45)

    def test_transforms(self):
        p = geom.point(1,0)
        R = Rotation(geom.point(0,0,1),90)
        assert geom.vclose(R.mul(p),geom.point(0,1))
        assert geom.vclose(Rotation(geom.point(0,0,1),90,inverse=True).mul(p),
                           geom.point(0,-1))
        T = Translation(geom.point(2,3,4))
        assert geom.vclose(T.mul(p),geom.point(3,3,4))
        assert T.mul(Translation(geom.point(2,3,4),inverse=True)).isclose(Matrix())
        S = Scale(2,3,4)
        assert geom.vclose(S.mul(geom.point(1,1,1)),geom.point(2,3,4))
        assert Scale(2).isclose(Scale(geom.point(2,2,2)))
        assert S.mul(Scale(2,3,4,inverse=True)).isclose(Matrix())
        with pytest.raises(ValueError):
            Scale(0,1,1,inverse=True)

    def test_about_center(self):
        R = aboutCenter(Rotation(geom.point(0,0,1),90),geom.point(1,1))
        assert geom.vclose(R.mul(geom.point(2,1)),geom.point(1,2))
        assert geom.vclose(R.mul(geom.point(1,1)),geom.point(1,1))

    def test_transformpoly(self):
        pts = [geom.point(0,0),geom.point(1,0),geom.point(1,1)]
        res = transformpoly(pts,Translation(geom.point(1,1)))
        assert len(res) == 3
        assert geom.vclose(res[2],geom.point(2,2))
        assert geom.vclose(pts[2],geom.point(1,1))
        with pytest.raises(ValueError):
            transformpoly(pts,"not a matrix")
