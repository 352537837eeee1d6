from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.catalogo.models.model_produto import ProdutoModel


class ProdutoRepository:
    def __init__(self, db: Session):
        self.db = db

    def listar(self) -> List[ProdutoModel]:
        return self.db.query(ProdutoModel).order_by(ProdutoModel.id).all()

    def buscar_por_id(self, produto_id: int) -> Optional[ProdutoModel]:
        return self.db.query(ProdutoModel).filter_by(id=produto_id).first()

    def listar_por_categoria(self, categoria: str) -> List[ProdutoModel]:
        return (
            self.db.query(ProdutoModel)
            .filter(ProdutoModel.categoria == categoria)
            .order_by(ProdutoModel.id)
            .all()
        )

    def criar(self, **data) -> ProdutoModel:
        obj = ProdutoModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def atualizar(self, produto_id: int, **data) -> Optional[ProdutoModel]:
        produto = self.buscar_por_id(produto_id)
        if not produto:
            return None
        for key, value in data.items():
            setattr(produto, key, value)
        self.db.flush()
        return produto

    def deletar(self, produto_id: int) -> bool:
        produto = self.buscar_por_id(produto_id)
        if not produto:
            return False
        self.db.delete(produto)
        self.db.flush()
        return True
